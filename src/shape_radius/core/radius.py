"""Pure corner transformations: RTL flip, percentage resolution, masking.

Every function accepts any radius-like input understood by
:func:`~shape_radius.core.units.coerce_radius` and returns a
:class:`~shape_radius.core.models.RadiusValue`.  Corner order is
always CSS shorthand order: top-left, top-right, bottom-right,
bottom-left.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shape_radius.core.models import (
    MAX_CORNERS,
    ZERO,
    CornerValue,
    Corners,
    Dimension,
    RadiusValue,
    Single,
)
from shape_radius.core.units import coerce_radius, parse_dimension
from shape_radius.exceptions import MaskLengthError, MaskValueError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------

def expand_corners(radius: object) -> tuple[CornerValue, ...]:
    """Expand a radius to exactly four corner values.

    * scalar / 1 value → ``[v, v, v, v]``
    * 2 values → ``[v1, v2, v1, v2]``
    * 3 values → ``[v1, v2, v3, v2]``
    * 4 values → unchanged
    """
    value = coerce_radius(radius)
    if isinstance(value, Single):
        return (value.value,) * MAX_CORNERS
    corners = value.values
    if len(corners) == 1:
        return corners * MAX_CORNERS
    if len(corners) == 2:
        return corners * 2
    if len(corners) == 3:
        return (*corners, corners[1])
    return corners


# ---------------------------------------------------------------------------
# RTL flip
# ---------------------------------------------------------------------------

def flip_radius(radius: object) -> RadiusValue:
    """Mirror a radius for right-to-left layouts.

    Horizontally adjacent corners swap places:

    * ``[TL, TR, BR, BL]`` → ``[TR, TL, BL, BR]``
    * ``[v1, v2, v3]`` → ``[v2, v1, v2, v3]``
    * ``[v1, v2]`` → ``[v2, v1]``
    * a scalar or single value is returned unchanged.
    """
    value = coerce_radius(radius)
    if isinstance(value, Single) or len(value) == 1:
        return value

    corners = value.values
    if len(corners) == 4:
        flipped = (corners[1], corners[0], corners[3], corners[2])
    elif len(corners) == 3:
        flipped = (corners[1], corners[0], corners[1], corners[2])
    else:
        flipped = (corners[1], corners[0])
    return Corners(flipped)


# ---------------------------------------------------------------------------
# Percentage resolution
# ---------------------------------------------------------------------------

def _resolve_percentage_corner(
    height: Dimension,
    corner: CornerValue,
) -> CornerValue:
    if not isinstance(corner, Dimension) or not corner.is_percentage:
        return corner
    return Dimension(height.coefficient * (corner.coefficient / 100), height.unit)


def resolve_percentage_radius(
    component_height: object,
    radius: object,
) -> RadiusValue:
    """Convert percentage corners to absolute lengths for a fixed height.

    ``absolute = component_height * (percentage / 100)``, carrying the
    unit of *component_height*.  Non-percentage corners pass through.

    Raises
    ------
    UnsupportedRadiusError
        When *component_height* is not an absolute length.
    """
    height = parse_dimension(component_height)
    value = coerce_radius(radius)
    if isinstance(value, Single):
        resolved: RadiusValue = Single(
            _resolve_percentage_corner(height, value.value),
        )
    else:
        resolved = Corners(
            tuple(_resolve_percentage_corner(height, c) for c in value.values),
        )
    logger.debug("Resolved %r at height %r to %r", value, height, resolved)
    return resolved


# ---------------------------------------------------------------------------
# Corner masking
# ---------------------------------------------------------------------------

def validate_mask(mask: Sequence[int]) -> tuple[int, ...]:
    """Check that *mask* holds exactly four ``0``/``1`` flags.

    Raises
    ------
    MaskLengthError
        When *mask* does not hold exactly 4 flags.
    MaskValueError
        When a flag is neither ``0`` nor ``1``.
    """
    flags = tuple(mask)
    if len(flags) != MAX_CORNERS:
        raise MaskLengthError(
            f"Invalid mask: {len(flags)} flags given, expected {MAX_CORNERS}.",
            hint="Give one flag per corner, e.g. 1 1 0 0.",
        )
    for flag in flags:
        if isinstance(flag, bool) or flag not in (0, 1):
            raise MaskValueError(
                f"Invalid mask flag: {flag!r}.",
                hint="Mask flags must be 1 (keep the corner) or 0 (square it).",
            )
    return flags


def mask_radius(radius: object, mask: Sequence[int]) -> Corners:
    """Keep corners flagged ``1`` and square off corners flagged ``0``.

    The radius is expanded to four corners first, so the result always
    holds four values.

    Raises
    ------
    ShapeLengthError
        When *radius* holds more than 4 values.
    MaskLengthError
        When *mask* does not hold exactly 4 flags.
    """
    corners = expand_corners(radius)
    flags = validate_mask(mask)
    return Corners(
        tuple(corner if flag == 1 else ZERO for corner, flag in zip(corners, flags)),
    )
