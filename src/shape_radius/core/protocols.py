"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these protocols, never on the concrete
loaders in :mod:`shape_radius.infra`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class CategoryProvider(Protocol):
    """Contract for shape-variables sources.

    Any object implementing :meth:`load_categories` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def load_categories(self) -> Mapping[str, object]:
        """Return raw category name → radius scalar pairs.

        Values may be CSS text (``"4px"``) or numbers.  Implementations
        must map their own failures to
        :class:`~shape_radius.exceptions.CategoryConfigError`.
        """
        ...  # pragma: no cover
