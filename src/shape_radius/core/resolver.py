"""Shape radius resolver — the category mapping bound to the operations.

:class:`ShapeRadiusResolver` carries an injected
:class:`~shape_radius.core.categories.ShapeCategories` instead of
reading a process-wide global, so two resolvers with different shape
variables can coexist.

Guarantees
----------
* Pure — no I/O, no ``print()``, no mutable state.
* Only :class:`~shape_radius.exceptions.ShapeRadiusError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shape_radius.core.categories import ShapeCategories, resolve_category_or_value
from shape_radius.core.models import Corners, RadiusValue
from shape_radius.core.protocols import CategoryProvider
from shape_radius.core.radius import flip_radius, mask_radius, resolve_percentage_radius

logger = logging.getLogger(__name__)


class ShapeRadiusResolver:
    """Stateless resolver bound to one set of shape categories.

    Parameters
    ----------
    categories:
        Shape-category mapping.  Defaults to the built-in shape variables.
    """

    def __init__(self, categories: ShapeCategories | None = None) -> None:
        self._categories: ShapeCategories = (
            categories if categories is not None else ShapeCategories.default()
        )

    @classmethod
    def from_provider(cls, provider: CategoryProvider) -> ShapeRadiusResolver:
        """Build a resolver whose categories extend the defaults with *provider*'s."""
        overrides = provider.load_categories()
        return cls(ShapeCategories.default().merged(overrides))

    @property
    def categories(self) -> ShapeCategories:
        return self._categories

    # ------------------------------------------------------------------
    # Single operations
    # ------------------------------------------------------------------

    def flip(self, radius: object) -> RadiusValue:
        return flip_radius(radius)

    def resolve_percentage(self, component_height: object, radius: object) -> RadiusValue:
        return resolve_percentage_radius(component_height, radius)

    def mask(self, radius: object, mask: Sequence[int]) -> Corners:
        return mask_radius(radius, mask)

    def resolve_category_or_value(self, radius: object) -> RadiusValue:
        return resolve_category_or_value(radius, self._categories)

    # ------------------------------------------------------------------
    # Pipelines
    # ------------------------------------------------------------------

    def resolve(
        self,
        radius: object,
        *,
        component_height: object | None = None,
        mask: Sequence[int] | None = None,
    ) -> RadiusValue:
        """Resolve *radius* into a value ready for a declaration.

        Steps, in order: percentage resolution (when *component_height*
        is given), corner masking (when *mask* is given), then
        category-or-value resolution.
        """
        value = radius
        if component_height is not None:
            value = resolve_percentage_radius(component_height, value)
        if mask is not None:
            value = mask_radius(value, mask)
        resolved = resolve_category_or_value(value, self._categories)
        logger.debug("Resolved radius %r to %r", radius, resolved)
        return resolved

    def resolve_rtl(
        self,
        radius: object,
        *,
        component_height: object | None = None,
        mask: Sequence[int] | None = None,
    ) -> RadiusValue:
        """Like :meth:`resolve`, mirrored for right-to-left layouts."""
        return flip_radius(
            self.resolve(radius, component_height=component_height, mask=mask),
        )
