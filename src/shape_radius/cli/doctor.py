"""``shape-radius doctor`` — environment diagnostics command.

Checks the interpreter, the optional UI libraries and the configured
shape-variables file, and renders a summary table (Rich when
available, plain text otherwise).
"""

from __future__ import annotations

import importlib
import importlib.metadata
import platform
import sys
from pathlib import Path

from shape_radius.cli import exit_codes
from shape_radius.cli.console import console
from shape_radius.exceptions import ShapeRadiusError
from shape_radius.infra.category_loader import JsonCategoryProvider
from shape_radius.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _optional_module_check(label: str, module: str) -> tuple[str, str, str]:
    """Return (label, version, status) for an optional UI dependency."""
    try:
        importlib.import_module(module)
    except ImportError:
        return label, "NOT INSTALLED", _WARN
    try:
        version = importlib.metadata.version(module)
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"
    return label, version, _OK


def _categories_check(path: Path | None) -> tuple[str, str, str]:
    """Return (label, value, status) for the shape-variables file."""
    if path is None:
        return "categories", "built-in defaults", _OK
    try:
        loaded = JsonCategoryProvider(path).load_categories()
    except ShapeRadiusError as exc:
        return "categories", str(exc), _FAIL
    return "categories", f"{path} ({len(loaded)} entries)", _OK


def _shape_radius_version_check() -> tuple[str, str, str]:
    return "shape-radius", __version__, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nshape-radius doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(categories_path: Path | None = None) -> int:
    """Run all checks and render a summary.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Missing optional
        UI libraries only warn.
    """
    checks = [
        _shape_radius_version_check(),
        _python_version_check(),
        _optional_module_check("rich", "rich"),
        _optional_module_check("questionary", "questionary"),
        _categories_check(categories_path),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
    else:
        table = Table(
            title="shape-radius doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
