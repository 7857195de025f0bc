"""CLI layer — argument parsing, interactive prompts, and error boundary.

This package is the outermost layer.  It may import from ``core``,
``infra`` and ``config``; no other layer may import from ``cli``.
"""
