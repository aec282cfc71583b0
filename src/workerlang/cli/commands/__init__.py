# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import list_runtimes, normalize, set_runtime, show

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register built-in CLI commands on ``app``."""

    show.register(app)
    set_runtime.register(app)
    normalize.register(app)
    list_runtimes.register(app)
