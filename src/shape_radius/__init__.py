"""shape-radius — border-radius computation for the shape primitive.

Resolves shape categories, percentage radii, corner masks and RTL
flipping into CSS-emittable ``border-radius`` values.
"""

from shape_radius.version import __version__

__all__: list[str] = ["__version__"]
