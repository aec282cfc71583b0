# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by the CLI output helpers."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console


def stdout_is_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _console(color: bool, emoji: bool, tty: bool) -> Console:
    return Console(
        color_system="auto" if color else None,
        force_terminal=tty,
        no_color=not color,
        emoji=emoji,
        soft_wrap=True,
    )


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a console for the requested presentation flags.

    Colour is only honoured on a terminal. Consoles write to whatever
    ``sys.stdout`` is at print time, so captured output still reaches them.
    """

    tty = stdout_is_tty()
    return _console(color and tty, emoji, tty)


__all__ = ["get_console", "stdout_is_tty"]
