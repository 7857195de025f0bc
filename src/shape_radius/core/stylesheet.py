"""``border-radius`` rule building and CSS rendering.

Builds the declarations a shape component emits: one rule for the
default (left-to-right) direction and, for RTL-reflexive shapes, an
override scoped to right-to-left contexts.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from shape_radius.core.resolver import ShapeRadiusResolver
from shape_radius.core.units import format_radius


@dataclass(frozen=True, slots=True)
class RadiusRule:
    """One CSS rule holding a single ``border-radius`` declaration."""

    selector: str
    value: str

    def render(self) -> str:
        return f"{self.selector} {{\n  border-radius: {self.value};\n}}"


def rtl_selector(selector: str) -> str:
    """Scope *selector* to right-to-left contexts.

    Matches both a ``dir="rtl"`` ancestor and the element itself
    carrying the attribute.
    """
    parts = [part.strip() for part in selector.split(",") if part.strip()]
    scoped: list[str] = []
    for part in parts:
        scoped.append(f"[dir=rtl] {part}")
        scoped.append(f"{part}[dir=rtl]")
    return ", ".join(scoped)


def build_radius_rules(
    selector: str,
    radius: object,
    resolver: ShapeRadiusResolver | None = None,
    *,
    rtl_reflexive: bool = False,
    component_height: object | None = None,
    mask: Sequence[int] | None = None,
) -> list[RadiusRule]:
    """Resolve *radius* and return the rules for *selector*.

    The RTL override is only emitted when *rtl_reflexive* is set and
    flipping actually changes the value.
    """
    if resolver is None:
        resolver = ShapeRadiusResolver()

    ltr = format_radius(
        resolver.resolve(radius, component_height=component_height, mask=mask),
    )
    rules = [RadiusRule(selector, ltr)]
    if rtl_reflexive:
        rtl = format_radius(
            resolver.resolve_rtl(radius, component_height=component_height, mask=mask),
        )
        if rtl != ltr:
            rules.append(RadiusRule(rtl_selector(selector), rtl))
    return rules


def render_rules(rules: Sequence[RadiusRule]) -> str:
    """Join rules into stylesheet text, one blank line between rules."""
    return "\n\n".join(rule.render() for rule in rules) + "\n"
