"""Shape categories and category-or-value resolution.

A shape category is a named radius preset (``small``, ``medium``,
``large``).  :class:`ShapeCategories` holds the name → value mapping;
it is read-only once built, so a single instance can be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from shape_radius.core.models import (
    CornerValue,
    Corners,
    Dimension,
    Expression,
    Keyword,
    RadiusValue,
    Single,
)
from shape_radius.core.units import coerce_radius, format_scalar, parse_scalar
from shape_radius.exceptions import unsupported_radius_error

logger = logging.getLogger(__name__)


DEFAULT_CATEGORY_VALUES: Mapping[str, str] = MappingProxyType(
    {
        "small": "4px",
        "medium": "4px",
        "large": "0",
    }
)
"""Built-in shape variables used when no shape-variables file is given."""


def is_concrete_radius(value: CornerValue) -> bool:
    """Return ``True`` for values usable directly in a declaration.

    Concrete values are non-percentage dimensions (unitless included)
    and ``var()``/``calc()`` expressions.
    """
    if isinstance(value, Dimension):
        return not value.is_percentage
    if isinstance(value, Expression):
        return value.is_runtime_resolved
    return False


class ShapeCategories(Mapping[str, CornerValue]):
    """Immutable mapping of shape-category names to concrete values.

    Parameters
    ----------
    values:
        Category name → radius scalar (model, number or CSS text).

    Raises
    ------
    UnsupportedRadiusError
        When a mapped value is not concrete (a percentage, keyword, …).
    """

    def __init__(self, values: Mapping[str, object]) -> None:
        parsed: dict[str, CornerValue] = {}
        for name, raw in values.items():
            value = parse_scalar(raw)
            if not is_concrete_radius(value):
                raise unsupported_radius_error(raw)
            parsed[str(name)] = value
        self._values: Mapping[str, CornerValue] = MappingProxyType(parsed)

    @classmethod
    def default(cls) -> ShapeCategories:
        return cls(DEFAULT_CATEGORY_VALUES)

    def merged(self, overrides: Mapping[str, object]) -> ShapeCategories:
        """Return a new mapping with *overrides* replacing or adding names."""
        return ShapeCategories({**self._values, **overrides})

    def __getitem__(self, name: str) -> CornerValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ShapeCategories({dict(self._values)!r})"


# ---------------------------------------------------------------------------
# Category-or-value resolution
# ---------------------------------------------------------------------------

def _resolve_corner(value: CornerValue, categories: ShapeCategories) -> CornerValue:
    if isinstance(value, Keyword) and value.name in categories:
        logger.debug("Category %r resolves to %r", value.name, categories[value.name])
        return categories[value.name]
    if is_concrete_radius(value):
        return value
    raise unsupported_radius_error(_display(value))


def _display(value: CornerValue) -> str:
    if isinstance(value, Keyword):
        return value.name
    return format_scalar(value)


def resolve_category_or_value(
    radius: object,
    categories: ShapeCategories | None = None,
) -> RadiusValue:
    """Substitute category names and validate every other corner value.

    Percentages are rejected: resolve them first with
    :func:`~shape_radius.core.radius.resolve_percentage_radius`.
    The list structure of *radius* is preserved.

    Raises
    ------
    ShapeLengthError
        When *radius* holds more than 4 values.
    UnsupportedRadiusError
        When a corner is neither a known category, a non-percentage
        dimension, nor a ``var()``/``calc()`` expression.
    """
    if categories is None:
        categories = ShapeCategories.default()
    value = coerce_radius(radius)
    if isinstance(value, Single):
        return Single(_resolve_corner(value.value, categories))
    return Corners(tuple(_resolve_corner(c, categories) for c in value.values))
