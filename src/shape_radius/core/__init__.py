"""Core layer — pure radius models and transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from shape_radius.core.categories import (
    DEFAULT_CATEGORY_VALUES,
    ShapeCategories,
    resolve_category_or_value,
)
from shape_radius.core.models import (
    Corners,
    CornerValue,
    Dimension,
    Expression,
    Keyword,
    RadiusValue,
    Single,
)
from shape_radius.core.protocols import CategoryProvider
from shape_radius.core.radius import (
    expand_corners,
    flip_radius,
    mask_radius,
    resolve_percentage_radius,
)
from shape_radius.core.resolver import ShapeRadiusResolver
from shape_radius.core.stylesheet import RadiusRule, build_radius_rules, render_rules
from shape_radius.core.units import format_radius, parse_radius, strip_unit

__all__: list[str] = [
    "DEFAULT_CATEGORY_VALUES",
    "CategoryProvider",
    "CornerValue",
    "Corners",
    "Dimension",
    "Expression",
    "Keyword",
    "RadiusRule",
    "RadiusValue",
    "ShapeCategories",
    "ShapeRadiusResolver",
    "Single",
    "build_radius_rules",
    "expand_corners",
    "flip_radius",
    "format_radius",
    "mask_radius",
    "parse_radius",
    "render_rules",
    "resolve_category_or_value",
    "resolve_percentage_radius",
    "strip_unit",
]
