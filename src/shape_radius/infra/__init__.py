"""Infrastructure layer — filesystem access.

Reads shape-variables files.  Every raw exception (``OSError``,
``json.JSONDecodeError``) is caught here and re-raised as a
:class:`~shape_radius.exceptions.ShapeRadiusError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from shape_radius.infra.category_loader import JsonCategoryProvider

__all__: list[str] = ["JsonCategoryProvider"]
