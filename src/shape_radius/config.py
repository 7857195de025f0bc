"""Environment-driven settings for the ``shape-radius`` CLI.

Variables
---------
``SHAPE_RADIUS_CATEGORIES``
    Path to a shape-variables JSON file.
``SHAPE_RADIUS_RTL_REFLEXIVE``
    Emit RTL overrides from ``shape-radius css`` by default.
``SHAPE_RADIUS_LOG_LEVEL``
    Logging level name (``DEBUG``, ``INFO``, ``WARNING``, …).

Command-line flags take precedence over these values.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from shape_radius.exceptions import CategoryConfigError

ENV_CATEGORIES = "SHAPE_RADIUS_CATEGORIES"
ENV_RTL_REFLEXIVE = "SHAPE_RADIUS_RTL_REFLEXIVE"
ENV_LOG_LEVEL = "SHAPE_RADIUS_LOG_LEVEL"

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved CLI settings."""

    categories_path: Path | None = None
    rtl_reflexive: bool = False
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _read_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _BOOL_TRUE:
        return True
    if normalized in _BOOL_FALSE:
        return False
    raise CategoryConfigError(
        f"Invalid boolean for {name}: {raw!r}.",
        hint="Use one of: true/false, 1/0, yes/no, on/off.",
    )


def _read_path(environ: Mapping[str, str], name: str) -> Path | None:
    raw = environ.get(name, "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def normalize_log_level(raw: str, *, source: str = ENV_LOG_LEVEL) -> str:
    """Upper-case and validate a logging level name."""
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise CategoryConfigError(
            f"Invalid log level for {source}: {raw!r}.",
            hint=f"Use one of: {', '.join(_LOG_LEVELS)}.",
        )
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from *environ* (``os.environ`` when ``None``).

    Raises
    ------
    CategoryConfigError
        When a variable holds an invalid value.
    """
    if environ is None:
        environ = os.environ
    log_level = environ.get(ENV_LOG_LEVEL)
    return Settings(
        categories_path=_read_path(environ, ENV_CATEGORIES),
        rtl_reflexive=_read_bool(environ, ENV_RTL_REFLEXIVE, False),
        log_level=normalize_log_level(log_level) if log_level else "WARNING",
    )
