# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared helpers for CLI command modules."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import typer

from ..logging import fail

CommandCallable = TypeVar("CommandCallable", bound=Callable[..., Any])

ROOT_OPTION = typer.Option(
    Path.cwd(),
    "--root",
    "-r",
    help="Project root containing local.settings.json.",
)
EMOJI_OPTION = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in CLI output.")


def register_command(
    app: typer.Typer,
    callback: CommandCallable,
    *,
    name: str,
    help_text: str | None = None,
) -> CommandCallable:
    """Register ``callback`` on ``app`` under ``name``.

    Args:
        app: Typer application receiving the command registration.
        callback: Command implementation.
        name: Command name shown in CLI usage output.
        help_text: Optional help text; defaults to the callback docstring.

    Returns:
        CommandCallable: The registered callback.
    """

    app.command(name=name, help=help_text)(callback)
    return callback


def exit_with_error(exc: Exception, *, use_emoji: bool) -> typer.Exit:
    """Report ``exc`` to the user and return the exit signal to raise."""

    fail(str(exc), use_emoji=use_emoji)
    return typer.Exit(code=1)


__all__ = ["EMOJI_OPTION", "ROOT_OPTION", "exit_with_error", "register_command"]
