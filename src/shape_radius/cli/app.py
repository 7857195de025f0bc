"""CLI application entry point and command routing for shape-radius.

This module is the **sole error boundary** for the application.  It
catches :class:`~shape_radius.exceptions.ShapeRadiusError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
short message on stderr and returns a well-defined exit code.

Commands
--------
* ``shape-radius flip RADIUS``
* ``shape-radius mask RADIUS --mask "1 1 0 0"``
* ``shape-radius percent RADIUS --height 36px``
* ``shape-radius resolve [RADIUS] [--height H] [--mask M] [--rtl]``
* ``shape-radius css SELECTOR RADIUS [--rtl-reflexive] [--height H] [--mask M]``
* ``shape-radius categories``
* ``shape-radius doctor``

Results are written to stdout so they can be piped into a stylesheet.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from shape_radius.cli import exit_codes
from shape_radius.cli.console import configure_logging, console, emit
from shape_radius.config import Settings, load_settings, normalize_log_level
from shape_radius.core.resolver import ShapeRadiusResolver
from shape_radius.core.units import format_radius
from shape_radius.exceptions import MaskValueError, ShapeRadiusError
from shape_radius.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_radius_argument(parser: argparse.ArgumentParser, *, optional: bool = False) -> None:
    parser.add_argument(
        "radius",
        nargs="*" if optional else "+",
        help="Radius value(s) in shorthand order, e.g. '4px 0 0 4px' or 'small'.",
    )


def _add_pipeline_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--height",
        default=None,
        help="Component height used to resolve percentage radii, e.g. 36px.",
    )
    parser.add_argument(
        "--mask",
        default=None,
        help="Corner mask in shorthand order, e.g. '1 1 0 0'.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="shape-radius",
        description="Compute border-radius values for shape components.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--categories",
        type=Path,
        default=None,
        help="Shape-variables JSON file (overrides SHAPE_RADIUS_CATEGORIES).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides SHAPE_RADIUS_LOG_LEVEL).",
    )

    commands = parser.add_subparsers(dest="command", metavar="command")

    flip = commands.add_parser("flip", help="Mirror a radius for RTL layouts.")
    _add_radius_argument(flip)

    mask = commands.add_parser("mask", help="Square off corners with a mask.")
    _add_radius_argument(mask)
    mask.add_argument("--mask", required=True, help="Corner mask, e.g. '1 1 0 0'.")

    percent = commands.add_parser("percent", help="Resolve percentage radii.")
    _add_radius_argument(percent)
    percent.add_argument("--height", required=True, help="Component height, e.g. 36px.")

    resolve = commands.add_parser(
        "resolve",
        help="Resolve categories and validate a radius (prompts when omitted).",
    )
    _add_radius_argument(resolve, optional=True)
    _add_pipeline_arguments(resolve)
    resolve.add_argument("--rtl", action="store_true", help="Emit the RTL value.")

    css = commands.add_parser("css", help="Emit border-radius rules for a selector.")
    css.add_argument("selector", help="CSS selector, e.g. '.mdc-button'.")
    _add_radius_argument(css)
    _add_pipeline_arguments(css)
    css.add_argument(
        "--rtl-reflexive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also emit an RTL override (default: SHAPE_RADIUS_RTL_REFLEXIVE).",
    )

    commands.add_parser("categories", help="List the configured shape categories.")
    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Argument conversion
# ---------------------------------------------------------------------------

def _parse_mask(text: str | None) -> list[int] | None:
    """Parse ``"1 1 0 0"`` / ``"1,1,0,0"`` into flags; length is checked later."""
    if text is None:
        return None
    flags: list[int] = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        if token not in ("0", "1"):
            raise MaskValueError(
                f"Invalid mask flag: {token!r}.",
                hint="Mask flags must be 1 (keep the corner) or 0 (square it).",
            )
        flags.append(int(token))
    return flags


def _join_radius(parts: list[str]) -> str:
    return " ".join(parts)


def _build_resolver(categories_path: Path | None) -> ShapeRadiusResolver:
    if categories_path is None:
        return ShapeRadiusResolver()
    from shape_radius.infra.category_loader import JsonCategoryProvider

    return ShapeRadiusResolver.from_provider(JsonCategoryProvider(categories_path))


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_resolve(args: argparse.Namespace, resolver: ShapeRadiusResolver) -> int:
    if args.radius:
        radius = _join_radius(args.radius)
    else:
        from shape_radius.cli.category_prompt import prompt_category_selection

        radius = prompt_category_selection(resolver.categories)

    resolve = resolver.resolve_rtl if args.rtl else resolver.resolve
    value = resolve(
        radius,
        component_height=args.height,
        mask=_parse_mask(args.mask),
    )
    emit(format_radius(value))
    return exit_codes.SUCCESS


def _handle_css(
    args: argparse.Namespace,
    resolver: ShapeRadiusResolver,
    settings: Settings,
) -> int:
    from shape_radius.core.stylesheet import build_radius_rules, render_rules

    rtl_reflexive = (
        settings.rtl_reflexive if args.rtl_reflexive is None else args.rtl_reflexive
    )
    rules = build_radius_rules(
        args.selector,
        _join_radius(args.radius),
        resolver,
        rtl_reflexive=rtl_reflexive,
        component_height=args.height,
        mask=_parse_mask(args.mask),
    )
    emit(render_rules(rules))
    return exit_codes.SUCCESS


def _dispatch(
    args: argparse.Namespace,
    resolver: ShapeRadiusResolver,
    settings: Settings,
) -> int:
    command: str = args.command
    if command == "flip":
        emit(format_radius(resolver.flip(_join_radius(args.radius))))
    elif command == "mask":
        emit(format_radius(resolver.mask(_join_radius(args.radius), _parse_mask(args.mask) or [])))
    elif command == "percent":
        emit(format_radius(resolver.resolve_percentage(args.height, _join_radius(args.radius))))
    elif command == "resolve":
        return _handle_resolve(args, resolver)
    elif command == "css":
        return _handle_css(args, resolver, settings)
    elif command == "categories":
        from shape_radius.cli.category_prompt import display_category_table

        display_category_table(resolver.categories)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the shape-radius CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = load_settings()
    log_level = (
        normalize_log_level(args.log_level, source="--log-level")
        if args.log_level
        else settings.log_level
    )
    configure_logging(log_level)

    categories_path: Path | None = args.categories or settings.categories_path

    if args.command == "doctor":
        from shape_radius.cli.doctor import run_doctor

        return run_doctor(categories_path)

    resolver = _build_resolver(categories_path)
    logger.debug("Running %s with %d categories", args.command, len(resolver.categories))
    return _dispatch(args, resolver, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ShapeRadiusError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
