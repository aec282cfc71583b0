# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `workerlang normalize` command."""

from __future__ import annotations

import typer

from ...errors import WorkerRuntimeError
from ...runtimes import AliasKind, WorkerRuntime, normalize
from ..shared import EMOJI_OPTION, exit_with_error, register_command


def normalize_command(
    value: str = typer.Argument(..., help="Free-form runtime or language string."),
    language: bool = typer.Option(
        False,
        "--language",
        "-l",
        help="Resolve against the language table instead of the runtime table.",
    ),
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Print the canonical runtime or language for VALUE."""

    kind = AliasKind.LANGUAGE if language else AliasKind.RUNTIME
    try:
        resolved = normalize(value, kind)
    except WorkerRuntimeError as exc:
        raise exit_with_error(exc, use_emoji=emoji) from exc
    typer.echo(resolved.value if isinstance(resolved, WorkerRuntime) else resolved)


def register(app: typer.Typer) -> None:
    """Register the normalize command on the Typer application."""

    register_command(app, normalize_command, name="normalize")


__all__ = ["normalize_command", "register"]
