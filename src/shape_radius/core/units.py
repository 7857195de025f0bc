"""CSS text codec for radius values.

Converts between CSS shorthand text (``"4px 0 0 4px"``) and the typed
models in :mod:`shape_radius.core.models`.  Every function here is a
**pure** transformation.

Accepted scalar forms
---------------------
* numbers: ``0``, ``4``, ``2.5`` (unitless :class:`Dimension`)
* dimensions: ``8px``, ``50%``, ``1.5rem``
* functions: ``var(--radius)``, ``calc(100% - 4px)`` (:class:`Expression`)
* identifiers: ``small`` (:class:`Keyword`)
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from shape_radius.core.models import (
    MAX_CORNERS,
    CornerValue,
    Corners,
    Dimension,
    Expression,
    Keyword,
    RadiusValue,
    Single,
)
from shape_radius.exceptions import shape_length_error, unsupported_radius_error

_CORNER_TYPES = (Dimension, Expression, Keyword)

_DIMENSION_RE = re.compile(
    r"^(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))(?P<unit>%|[a-zA-Z]+)?$"
)
_FUNCTION_RE = re.compile(r"^[a-zA-Z-]+\(.*\)$", re.DOTALL)
_KEYWORD_RE = re.compile(r"^-?[a-zA-Z_][a-zA-Z0-9_-]*$")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def _to_number(text: str) -> float:
    value = float(text)
    if value.is_integer():
        return int(value)
    return value


def format_number(value: float) -> str:
    """Render a coefficient without a trailing ``.0`` (``18.0`` → ``18``)."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return str(value)
    return f"{value:.4f}".rstrip("0").rstrip(".")


def strip_unit(value: object) -> float:
    """Return the numeric coefficient of a dimensioned value.

    ``strip_unit("50%") == 50`` and ``strip_unit(Dimension(8, "px")) == 8``.
    Raises :class:`UnsupportedRadiusError` for non-numeric values.
    """
    scalar = parse_scalar(value)
    if not isinstance(scalar, Dimension):
        raise unsupported_radius_error(value)
    return scalar.coefficient


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def parse_scalar(value: object) -> CornerValue:
    """Convert one scalar (model, number or CSS token) to a corner value."""
    if isinstance(value, _CORNER_TYPES):
        return value
    # bool is an int subclass but never a length.
    if isinstance(value, bool):
        raise unsupported_radius_error(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise unsupported_radius_error(value)
        return Dimension(value)
    if not isinstance(value, str):
        raise unsupported_radius_error(value)

    text = value.strip()
    match = _DIMENSION_RE.match(text)
    if match:
        return Dimension(_to_number(match["number"]), match["unit"] or "")
    if _FUNCTION_RE.match(text):
        return Expression(text)
    if _KEYWORD_RE.match(text):
        return Keyword(text)
    raise unsupported_radius_error(value)


def parse_dimension(value: object) -> Dimension:
    """Parse an absolute length such as a component height.

    Percentages and non-numeric values raise :class:`UnsupportedRadiusError`.
    """
    scalar = parse_scalar(value)
    if not isinstance(scalar, Dimension) or scalar.is_percentage:
        raise unsupported_radius_error(value)
    return scalar


def format_scalar(value: CornerValue) -> str:
    """Render one corner value as CSS text."""
    if isinstance(value, Dimension):
        return f"{format_number(value.value)}{value.unit}"
    if isinstance(value, Expression):
        return value.text
    return value.name


# ---------------------------------------------------------------------------
# Shorthand lists
# ---------------------------------------------------------------------------

def split_shorthand(text: str) -> list[str]:
    """Split shorthand text on whitespace, keeping ``(...)`` groups whole.

    ``split_shorthand("calc(1px + 2px) 0")`` → ``["calc(1px + 2px)", "0"]``.
    """
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise unsupported_radius_error(text)
        if char.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(char)
    if depth != 0:
        raise unsupported_radius_error(text)
    if current:
        tokens.append("".join(current))
    return tokens


def _corners_from(items: Sequence[object]) -> Corners:
    """Build :class:`Corners`, checking the length before parsing values."""
    if not 1 <= len(items) <= MAX_CORNERS:
        raise shape_length_error(len(items))
    return Corners(tuple(parse_scalar(item) for item in items))


def coerce_radius(radius: object) -> RadiusValue:
    """Convert any radius-like input to a :class:`RadiusValue`.

    Accepts a :class:`Single`/:class:`Corners`, a corner value, a
    number, a shorthand string, or a list/tuple of scalars.  Strings
    with several tokens and sequences become :class:`Corners`.

    Raises
    ------
    ShapeLengthError
        When a list or shorthand string holds more than 4 values.
    UnsupportedRadiusError
        When a scalar cannot be parsed.
    """
    if isinstance(radius, (Single, Corners)):
        return radius
    if isinstance(radius, str):
        tokens = split_shorthand(radius)
        if not tokens:
            raise unsupported_radius_error(radius)
        if len(tokens) == 1:
            return Single(parse_scalar(tokens[0]))
        return _corners_from(tokens)
    if isinstance(radius, (list, tuple)):
        return _corners_from(radius)
    return Single(parse_scalar(radius))


def parse_radius(text: str) -> RadiusValue:
    """Parse ``border-radius`` shorthand text."""
    return coerce_radius(text)


def format_radius(radius: object) -> str:
    """Render a radius as the value of a ``border-radius`` declaration."""
    value = coerce_radius(radius)
    if isinstance(value, Single):
        return format_scalar(value.value)
    return " ".join(format_scalar(corner) for corner in value.values)
