"""Domain models for shape-radius.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  A radius is a tagged variant: either a
:class:`Single` scalar or a :class:`Corners` list of 1–4 values in CSS
shorthand order (top-left, top-right, bottom-right, bottom-left).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from shape_radius.exceptions import shape_length_error

PERCENT: str = "%"
"""Unit tag of percentage dimensions."""

MAX_CORNERS: int = 4
"""Largest number of values a ``border-radius`` shorthand accepts."""


# ---------------------------------------------------------------------------
# Corner values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dimension:
    """A number paired with its unit tag (``px``, ``rem``, ``%``, …)."""

    value: float
    """Numeric coefficient as written (``8`` for ``8px``)."""

    unit: str = ""
    """Unit tag.  Empty for unitless numbers such as ``0``."""

    @property
    def coefficient(self) -> float:
        """The bare number with the unit stripped."""
        return self.value

    @property
    def is_percentage(self) -> bool:
        return self.unit == PERCENT

    @property
    def is_unitless(self) -> bool:
        return self.unit == ""


@dataclass(frozen=True, slots=True)
class Expression:
    """Opaque CSS function expression such as ``var(--x)``.

    The text is emitted verbatim; its value is only known by the
    browser at runtime.
    """

    text: str

    @property
    def is_runtime_resolved(self) -> bool:
        """``True`` for ``var()`` and ``calc()`` expressions."""
        return "var(" in self.text or "calc(" in self.text


@dataclass(frozen=True, slots=True)
class Keyword:
    """A bare identifier, typically a shape category name."""

    name: str


CornerValue = Union[Dimension, Expression, Keyword]


ZERO: Dimension = Dimension(0)
"""Unitless zero emitted for masked corners."""


# ---------------------------------------------------------------------------
# Radius variant
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Single:
    """A scalar radius applied to every corner."""

    value: CornerValue


@dataclass(frozen=True, slots=True)
class Corners:
    """An ordered list of 1–4 corner values in shorthand order.

    Raises :class:`~shape_radius.exceptions.ShapeLengthError` when
    constructed with no values or more than four.
    """

    values: tuple[CornerValue, ...]

    def __post_init__(self) -> None:
        if not 1 <= len(self.values) <= MAX_CORNERS:
            raise shape_length_error(len(self.values))

    def __len__(self) -> int:
        return len(self.values)


RadiusValue = Union[Single, Corners]
