# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import typer

from .commands import register_commands

app = typer.Typer(help="Inspect and select the worker runtime of a functions project.", no_args_is_help=True)
register_commands(app)

__all__ = ["app"]
