"""JSON-file implementation of :class:`~shape_radius.core.protocols.CategoryProvider`.

A shape-variables file is a flat JSON object mapping category names to
radius scalars::

    {"small": "4px", "medium": "8px", "large": "var(--shape-large)"}

Every failure (missing file, bad JSON, unusable value) is re-raised as
:class:`~shape_radius.exceptions.CategoryConfigError`; nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from shape_radius.core.categories import ShapeCategories
from shape_radius.exceptions import CategoryConfigError, ShapeRadiusError

logger = logging.getLogger(__name__)


class JsonCategoryProvider:
    """Concrete :class:`CategoryProvider` reading a shape-variables file.

    Usage::

        provider = JsonCategoryProvider(Path("shape-variables.json"))
        resolver = ShapeRadiusResolver.from_provider(provider)
    """

    def __init__(self, path: Path | str) -> None:
        self._path: Path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def load_categories(self) -> Mapping[str, object]:
        """Read and validate the shape-variables file.

        Raises
        ------
        CategoryConfigError
            When the file cannot be read, is not a JSON object, or maps
            a category to a value that is not a concrete radius.
        """
        raw = self._read()
        if not isinstance(raw, dict):
            raise CategoryConfigError(
                f"Shape variables in {self._path} must be a JSON object.",
                hint='Example: {"small": "4px", "medium": "4px", "large": "0"}',
            )

        values: dict[str, object] = {}
        for name, value in raw.items():
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise CategoryConfigError(
                    f"Shape category {name!r} in {self._path} has an invalid value: {value!r}.",
                    hint="Values must be CSS lengths, numbers, or var()/calc() expressions.",
                )
            values[name] = value

        try:
            ShapeCategories(values)
        except ShapeRadiusError as exc:
            raise CategoryConfigError(
                f"Invalid shape variables in {self._path}: {exc}",
                hint=exc.hint,
            ) from exc

        logger.info("Loaded %d shape categories from %s", len(values), self._path)
        return values

    def _read(self) -> object:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise CategoryConfigError(
                f"Shape variables file not found: {self._path}",
                hint="Check --categories or SHAPE_RADIUS_CATEGORIES.",
            ) from exc
        except OSError as exc:
            raise CategoryConfigError(
                f"Cannot read shape variables file {self._path}: {exc}",
            ) from exc
        except UnicodeDecodeError as exc:
            raise CategoryConfigError(
                f"Shape variables file {self._path} is not valid UTF-8: {exc.reason} "
                f"(byte offset {exc.start})",
                hint="Save the file with UTF-8 encoding.",
            ) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise CategoryConfigError(
                f"Shape variables file {self._path} is not valid JSON: {exc.msg} "
                f"(line {exc.lineno}, column {exc.colno})",
            ) from exc
