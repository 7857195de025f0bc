"""Tests for ShapeRadiusResolver (core/resolver.py).

The :class:`CategoryProvider` dependency is mocked where needed.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from shape_radius.core.categories import ShapeCategories
from shape_radius.core.models import Corners, Dimension, Expression, Single
from shape_radius.core.resolver import ShapeRadiusResolver
from shape_radius.exceptions import (
    MaskLengthError,
    ShapeLengthError,
    UnsupportedRadiusError,
)


def _px(value: float) -> Dimension:
    return Dimension(value, "px")


class TestConstruction:
    def test_defaults(self) -> None:
        assert ShapeRadiusResolver().categories["small"] == _px(4)

    def test_injected_categories(self) -> None:
        categories = ShapeCategories({"small": "12px"})
        resolver = ShapeRadiusResolver(categories)
        assert resolver.categories is categories

    def test_from_provider_extends_defaults(self) -> None:
        provider = MagicMock()
        provider.load_categories.return_value = {"medium": "8px", "pill": "var(--pill)"}

        resolver = ShapeRadiusResolver.from_provider(provider)

        provider.load_categories.assert_called_once_with()
        assert resolver.categories["medium"] == _px(8)
        assert resolver.categories["pill"] == Expression("var(--pill)")
        assert resolver.categories["small"] == _px(4)

    def test_independent_resolvers(self) -> None:
        a = ShapeRadiusResolver(ShapeCategories({"small": "2px"}))
        b = ShapeRadiusResolver(ShapeCategories({"small": "6px"}))
        assert a.resolve("small") == Single(_px(2))
        assert b.resolve("small") == Single(_px(6))


class TestOperations:
    def test_flip(self, resolver: ShapeRadiusResolver) -> None:
        assert resolver.flip("0 8px") == Corners((_px(8), Dimension(0)))

    def test_resolve_percentage(self, resolver: ShapeRadiusResolver) -> None:
        assert resolver.resolve_percentage(36, "50%") == Single(Dimension(18))

    def test_mask(self, resolver: ShapeRadiusResolver) -> None:
        result = resolver.mask("small", [1, 0, 0, 0])
        assert len(result) == 4

    def test_resolve_category_or_value(self, resolver: ShapeRadiusResolver) -> None:
        assert resolver.resolve_category_or_value("large") == Single(Dimension(0))


class TestResolvePipeline:
    def test_category_only(self, resolver: ShapeRadiusResolver) -> None:
        assert resolver.resolve("medium") == Single(_px(4))

    def test_percentage_without_height_rejected(self, resolver: ShapeRadiusResolver) -> None:
        with pytest.raises(UnsupportedRadiusError):
            resolver.resolve("50%")

    def test_percentage_with_height(self, resolver: ShapeRadiusResolver) -> None:
        assert resolver.resolve("50%", component_height="36px") == Single(_px(18))

    def test_mask_then_category(self, resolver: ShapeRadiusResolver) -> None:
        result = resolver.resolve("small", mask=[1, 1, 0, 0])
        assert result == Corners((_px(4), _px(4), Dimension(0), Dimension(0)))

    def test_full_pipeline(self, resolver: ShapeRadiusResolver) -> None:
        result = resolver.resolve(
            "50% small",
            component_height="32px",
            mask=[1, 1, 1, 0],
        )
        assert result == Corners((_px(16), _px(4), _px(16), Dimension(0)))

    def test_rtl(self, resolver: ShapeRadiusResolver) -> None:
        result = resolver.resolve_rtl("small", mask=[1, 0, 0, 1])
        assert result == Corners((Dimension(0), _px(4), _px(4), Dimension(0)))

    def test_bad_mask(self, resolver: ShapeRadiusResolver) -> None:
        with pytest.raises(MaskLengthError):
            resolver.resolve("small", mask=[1, 1])

    def test_too_many_values(self, resolver: ShapeRadiusResolver) -> None:
        with pytest.raises(ShapeLengthError):
            resolver.resolve("1px 2px 3px 4px 5px")
