"""Allow ``python -m shape_radius`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m shape_radius`` behaves identically to the ``shape-radius``
console script.
"""

from __future__ import annotations

from shape_radius.cli.app import cli

if __name__ == "__main__":
    cli()
