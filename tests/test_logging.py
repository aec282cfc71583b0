# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the CLI status line helpers."""

from __future__ import annotations

import pytest

from workerlang.logging import fail, ok, warn


def test_status_lines_without_emoji(capsys: pytest.CaptureFixture[str]) -> None:
    ok("done", use_emoji=False)
    warn("careful", use_emoji=False)
    fail("broken", use_emoji=False)

    assert capsys.readouterr().out.splitlines() == ["done", "careful", "broken"]


def test_status_lines_with_emoji(capsys: pytest.CaptureFixture[str]) -> None:
    fail("broken", use_emoji=True, use_color=False)

    assert capsys.readouterr().out.strip() == "❌ broken"
