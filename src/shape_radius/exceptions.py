"""Custom exception hierarchy for shape-radius.

Every validation failure raised by the core layer inherits from
:class:`ShapeRadiusError`.  Failures are synchronous and abort the
whole call: a stylesheet build treats them as fatal.

Hierarchy
---------
ShapeRadiusError
├── ShapeLengthError
├── MaskLengthError
├── MaskValueError
├── UnsupportedRadiusError
├── CategorySelectionError
├── CategoryConfigError
└── EnvironmentError
"""

from __future__ import annotations


class ShapeRadiusError(Exception):
    """Base exception for all shape-radius errors.

    The CLI error boundary renders the message (and the hint, when
    present) without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Radius shape ----------------------------------------------------------

class ShapeLengthError(ShapeRadiusError):
    """Raised when a radius list does not hold between 1 and 4 values."""


class UnsupportedRadiusError(ShapeRadiusError):
    """Raised when a radius value is not a category, length or var()/calc()."""


# --- Corner masks ----------------------------------------------------------

class MaskLengthError(ShapeRadiusError):
    """Raised when a mask vector does not hold exactly 4 flags."""


class MaskValueError(ShapeRadiusError):
    """Raised when a mask flag is neither ``0`` nor ``1``."""


# --- Interactive selection -------------------------------------------------

class CategorySelectionError(ShapeRadiusError):
    """Raised when no shape category can be picked interactively."""


# --- Configuration / environment ------------------------------------------

class CategoryConfigError(ShapeRadiusError):
    """Raised when shape variables or settings cannot be loaded."""


class EnvironmentError(ShapeRadiusError):
    """Raised when an optional runtime dependency is not available."""


def shape_length_error(count: int) -> ShapeLengthError:
    """Build the error raised for a radius list of *count* values."""
    return ShapeLengthError(
        f"Invalid radius: {count} values given, expected 1 to 4.",
        hint="Use CSS shorthand order: top-left top-right bottom-right bottom-left.",
    )


def unsupported_radius_error(value: object) -> UnsupportedRadiusError:
    """Build the error raised for a radius value that cannot be used."""
    return UnsupportedRadiusError(
        f"Invalid radius: {value!r} radius is not supported.",
        hint="Use a shape category, a non-percentage length, or var()/calc().",
    )
