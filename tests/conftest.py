# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from workerlang.constants import FUNCTIONS_WORKER_RUNTIME
from workerlang.settings import InMemorySettingsStore


@pytest.fixture(autouse=True)
def _clear_worker_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own runtime selection out of the tests."""
    monkeypatch.delenv(FUNCTIONS_WORKER_RUNTIME, raising=False)


@pytest.fixture
def store() -> InMemorySettingsStore:
    """Return an empty in-memory settings store."""
    return InMemorySettingsStore()
