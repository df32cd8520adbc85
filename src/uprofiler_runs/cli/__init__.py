"""CLI module for uprofiler-runs.

This module provides the command-line interface using Typer.
"""

from __future__ import annotations

from uprofiler_runs.cli.main import app

__all__ = ["app"]
