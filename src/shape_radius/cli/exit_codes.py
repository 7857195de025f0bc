"""Process exit codes returned by the ``shape-radius`` CLI."""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed; output was written to stdout."""

GENERAL_ERROR: int = 1
"""A ShapeRadiusError was caught and rendered (invalid radius, mask, config)."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the shape-radius hierarchy escaped."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
