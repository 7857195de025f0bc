"""Tests for environment-driven settings (config.py)."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from shape_radius.config import Settings, load_settings, normalize_log_level
from shape_radius.exceptions import CategoryConfigError


class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings({}) == Settings()

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SHAPE_RADIUS_RTL_REFLEXIVE", "yes")
        assert load_settings().rtl_reflexive is True

    def test_categories_path(self) -> None:
        settings = load_settings({"SHAPE_RADIUS_CATEGORIES": "/tmp/shape.json"})
        assert settings.categories_path == Path("/tmp/shape.json")

    def test_blank_categories_path_ignored(self) -> None:
        assert load_settings({"SHAPE_RADIUS_CATEGORIES": "  "}).categories_path is None

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", True), ("TRUE", True), (" on ", True), ("0", False), ("no", False)],
    )
    def test_bool_values(self, raw: str, expected: bool) -> None:
        settings = load_settings({"SHAPE_RADIUS_RTL_REFLEXIVE": raw})
        assert settings.rtl_reflexive is expected

    def test_invalid_bool(self) -> None:
        with pytest.raises(CategoryConfigError, match="Invalid boolean"):
            load_settings({"SHAPE_RADIUS_RTL_REFLEXIVE": "maybe"})

    def test_log_level(self) -> None:
        settings = load_settings({"SHAPE_RADIUS_LOG_LEVEL": "debug"})
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_invalid_log_level(self) -> None:
        with pytest.raises(CategoryConfigError, match="Invalid log level"):
            load_settings({"SHAPE_RADIUS_LOG_LEVEL": "loud"})


class TestNormalizeLogLevel:
    def test_names_source(self) -> None:
        with pytest.raises(CategoryConfigError, match="--log-level"):
            normalize_log_level("verbose", source="--log-level")

    def test_upper_cases(self) -> None:
        assert normalize_log_level(" info ") == "INFO"
