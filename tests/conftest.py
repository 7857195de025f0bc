"""Shared pytest fixtures and configuration for the shape-radius test suite.

Guidelines
----------
* Core tests are pure function calls — no I/O, no mocking.
* Filesystem access only through ``tmp_path``.
* ``SHAPE_RADIUS_*`` variables from the host never leak into tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shape_radius.core.categories import ShapeCategories
from shape_radius.core.resolver import ShapeRadiusResolver


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SHAPE_RADIUS_CATEGORIES",
        "SHAPE_RADIUS_RTL_REFLEXIVE",
        "SHAPE_RADIUS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def resolver() -> ShapeRadiusResolver:
    return ShapeRadiusResolver(ShapeCategories.default())


@pytest.fixture
def shape_variables(tmp_path: Path) -> Path:
    """A shape-variables file overriding ``medium`` and adding ``pill``."""
    path = tmp_path / "shape-variables.json"
    path.write_text(
        json.dumps({"medium": "8px", "pill": "var(--shape-pill)"}),
        encoding="utf-8",
    )
    return path
