# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status lines printed by the CLI and by :func:`~workerlang.runtimes.set_worker_runtime`."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from .console import get_console, stdout_is_tty

# level -> (emoji prefix, rich style)
_LEVELS: Final[dict[str, tuple[str, str]]] = {
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}


def _emit(level: str, msg: str, *, use_emoji: bool, use_color: bool | None) -> None:
    prefix, style = _LEVELS[level]
    color = stdout_is_tty() if use_color is None else use_color
    text = Text(f"{prefix if use_emoji else ''}{msg}")
    if color:
        text.stylize(style)
    get_console(color=color, emoji=use_emoji).print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a completed action."""

    _emit("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report an advisory the user should notice."""

    _emit("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report an error before the command exits."""

    _emit("fail", msg, use_emoji=use_emoji, use_color=use_color)


__all__ = ["fail", "ok", "warn"]
