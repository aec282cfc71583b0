# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `workerlang list` command."""

from __future__ import annotations

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from ...runtimes import aliases_for_runtime, runtime_moniker, worker_display_strings
from ..shared import register_command


def list_command() -> None:
    """List the worker runtimes a project can select."""

    table = Table(title="Worker runtimes", box=box.SIMPLE, expand=True)
    table.add_column("Moniker", style="bold", no_wrap=True)
    table.add_column("Description")
    table.add_column("Aliases", overflow="fold")
    for runtime, label in worker_display_strings().items():
        aliases = sorted(alias for alias in aliases_for_runtime(runtime) if alias != runtime_moniker(runtime))
        table.add_row(runtime_moniker(runtime), label, ", ".join(aliases) or "-")
    Console(soft_wrap=True).print(table)


def register(app: typer.Typer) -> None:
    """Register the list command on the Typer application."""

    register_command(app, list_command, name="list")


__all__ = ["list_command", "register"]
