"""Tests for border-radius rule building (core/stylesheet.py)."""

from __future__ import annotations

import pytest

from shape_radius.core.categories import ShapeCategories
from shape_radius.core.resolver import ShapeRadiusResolver
from shape_radius.core.stylesheet import (
    RadiusRule,
    build_radius_rules,
    render_rules,
    rtl_selector,
)
from shape_radius.exceptions import UnsupportedRadiusError


class TestRtlSelector:
    def test_single_selector(self) -> None:
        assert rtl_selector(".chip") == "[dir=rtl] .chip, .chip[dir=rtl]"

    def test_selector_list(self) -> None:
        assert rtl_selector(".a, .b") == (
            "[dir=rtl] .a, .a[dir=rtl], [dir=rtl] .b, .b[dir=rtl]"
        )


class TestBuildRadiusRules:
    def test_ltr_only(self, resolver: ShapeRadiusResolver) -> None:
        rules = build_radius_rules(".button", "small", resolver)
        assert rules == [RadiusRule(".button", "4px")]

    def test_default_resolver(self) -> None:
        assert build_radius_rules(".card", "large") == [RadiusRule(".card", "0")]

    def test_rtl_override_when_asymmetric(self, resolver: ShapeRadiusResolver) -> None:
        rules = build_radius_rules(".chip", "4px 0 0 4px", resolver, rtl_reflexive=True)
        assert rules == [
            RadiusRule(".chip", "4px 0 0 4px"),
            RadiusRule("[dir=rtl] .chip, .chip[dir=rtl]", "0 4px 4px 0"),
        ]

    def test_no_rtl_override_when_symmetric(self, resolver: ShapeRadiusResolver) -> None:
        rules = build_radius_rules(".chip", "4px 4px 0 0", resolver, rtl_reflexive=True)
        assert len(rules) == 1

    def test_height_and_mask(self) -> None:
        resolver = ShapeRadiusResolver(ShapeCategories({"small": "2px"}))
        rules = build_radius_rules(
            ".fab",
            "50%",
            resolver,
            component_height="56px",
            mask=[1, 1, 0, 0],
        )
        assert rules == [RadiusRule(".fab", "28px 28px 0 0")]

    def test_invalid_radius_propagates(self, resolver: ShapeRadiusResolver) -> None:
        with pytest.raises(UnsupportedRadiusError):
            build_radius_rules(".x", "50%", resolver)


class TestRenderRules:
    def test_render(self) -> None:
        text = render_rules(
            [
                RadiusRule(".chip", "4px 0 0 4px"),
                RadiusRule("[dir=rtl] .chip, .chip[dir=rtl]", "0 4px 4px 0"),
            ]
        )
        assert text == (
            ".chip {\n  border-radius: 4px 0 0 4px;\n}\n"
            "\n"
            "[dir=rtl] .chip, .chip[dir=rtl] {\n  border-radius: 0 4px 4px 0;\n}\n"
        )
