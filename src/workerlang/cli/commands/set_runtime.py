# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the `workerlang set` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ...errors import WorkerRuntimeError
from ...logging import ok, warn
from ...runtimes import runtime_moniker, set_worker_runtime
from ...settings import LocalSettingsStore, SettingsError
from ..shared import EMOJI_OPTION, ROOT_OPTION, exit_with_error, register_command


def set_command(
    value: str = typer.Argument(..., help="Runtime name, moniker or language alias."),
    root: Path = ROOT_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Persist the worker runtime in the project's local.settings.json."""

    store = LocalSettingsStore.for_root(root.resolve())
    try:
        runtime = set_worker_runtime(store, value, notify=lambda message: warn(message, use_emoji=emoji))
    except (WorkerRuntimeError, SettingsError) as exc:
        raise exit_with_error(exc, use_emoji=emoji) from exc

    ok(f"Using worker runtime {runtime_moniker(runtime)}.", use_emoji=emoji)


def register(app: typer.Typer) -> None:
    """Register the set command on the Typer application."""

    register_command(app, set_command, name="set")


__all__ = ["register", "set_command"]
