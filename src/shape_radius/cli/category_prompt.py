"""Shape-category listing and interactive selection for the CLI layer.

This module is responsible for:

* Rendering a Rich table of the configured shape categories.
* Prompting the user to pick a category via questionary arrow keys.
* Returning the chosen category name.

No radius logic lives here.
"""

from __future__ import annotations

from typing import Any

from shape_radius.cli.console import get_rich_console
from shape_radius.core.categories import DEFAULT_CATEGORY_VALUES, ShapeCategories
from shape_radius.core.units import format_scalar
from shape_radius.exceptions import CategorySelectionError, EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for category rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def _category_source(name: str, categories: ShapeCategories) -> str:
    """``"default"``, ``"override"`` or ``"custom"`` for one category."""
    if name not in DEFAULT_CATEGORY_VALUES:
        return "custom"
    default = ShapeCategories.default()[name]
    return "default" if categories[name] == default else "override"


def _build_choice_label(index: int, name: str, categories: ShapeCategories) -> str:
    """Single-line label shown in the selector: ``"  1.  small      4px"``."""
    return f"  {index + 1}.  {name:<10} {format_scalar(categories[name])}"


def display_category_table(categories: ShapeCategories) -> None:
    """Print a Rich table summarising the shape categories to stdout."""
    table_class = _import_rich_table()

    table = table_class(
        title="Shape Categories",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Category", justify="left", min_width=10)
    table.add_column("Radius", justify="right", min_width=8)
    table.add_column("Source", justify="left", min_width=8)

    for i, name in enumerate(categories, start=1):
        table.add_row(
            str(i),
            name,
            format_scalar(categories[name]),
            _category_source(name, categories),
        )

    get_rich_console(stderr=False).print(table)


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_category_selection(categories: ShapeCategories) -> str:
    """Display categories and prompt the user to pick one.

    Returns
    -------
    str
        The chosen category name.

    Raises
    ------
    CategorySelectionError
        If there are no categories or the prompt is cancelled.
    """
    if not categories:
        raise CategorySelectionError(
            "No shape categories are configured.",
            hint="Pass a radius value or a shape-variables file with --categories.",
        )

    questionary = _import_questionary()

    display_category_table(categories)

    choices = [
        questionary.Choice(
            title=_build_choice_label(i, name, categories),
            value=name,
        )
        for i, name in enumerate(categories)
    ]

    selected: str | None = questionary.select(
        "Select shape category:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # None on Ctrl+C / Esc

    if selected is None:
        raise CategorySelectionError(
            "No shape category selected.",
            hint="Use arrow keys to pick a category, then press Enter.",
        )

    return selected
