# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `workerlang show` command."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from ...errors import UnsupportedForTemplatesError
from ...runtimes import (
    current_worker_runtime,
    default_template_language,
    runtime_moniker,
    supported_languages,
)
from ...settings import LocalSettingsStore, SettingsError
from ..shared import EMOJI_OPTION, ROOT_OPTION, exit_with_error, register_command


def show_command(root: Path = ROOT_OPTION, emoji: bool = EMOJI_OPTION) -> None:
    """Show the worker runtime detected for a project."""

    store = LocalSettingsStore.for_root(root.resolve())
    try:
        runtime = current_worker_runtime(store)
    except SettingsError as exc:
        raise exit_with_error(exc, use_emoji=emoji) from exc

    try:
        language = default_template_language(runtime)
    except UnsupportedForTemplatesError:
        language = "n/a"

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Runtime", runtime.value)
    table.add_row("Moniker", runtime_moniker(runtime))
    table.add_row("Default language", language)
    table.add_row("Supported languages", ", ".join(supported_languages(runtime)) or "-")
    Console(soft_wrap=True).print(table)


def register(app: typer.Typer) -> None:
    """Register the show command on the Typer application."""

    register_command(app, show_command, name="show")


__all__ = ["register", "show_command"]
