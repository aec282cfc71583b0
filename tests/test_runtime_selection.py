# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for detecting and persisting the worker runtime."""

from __future__ import annotations

from pathlib import Path

import pytest

from workerlang.constants import FUNCTIONS_WORKER_RUNTIME
from workerlang.errors import EmptyInputError, UnrecognizedValueError
from workerlang.runtimes import (
    RUNTIME_ALIASES,
    WorkerRuntime,
    current_worker_runtime,
    runtime_moniker,
    set_worker_runtime,
)
from workerlang.settings import InMemorySettingsStore, LocalSettingsStore


@pytest.mark.parametrize("runtime", sorted(set(RUNTIME_ALIASES.values())))
def test_current_runtime_round_trips_monikers(runtime: WorkerRuntime) -> None:
    store = InMemorySettingsStore({FUNCTIONS_WORKER_RUNTIME: runtime_moniker(runtime)})

    assert current_worker_runtime(store, environ={}) is runtime


def test_current_runtime_defaults_to_none(store: InMemorySettingsStore) -> None:
    assert current_worker_runtime(store, environ={}) is WorkerRuntime.NONE
    assert current_worker_runtime(store) is WorkerRuntime.NONE


def test_current_runtime_ignores_garbage() -> None:
    store = InMemorySettingsStore({FUNCTIONS_WORKER_RUNTIME: "xyz"})

    assert current_worker_runtime(store, environ={}) is WorkerRuntime.NONE


def test_current_runtime_reads_none_moniker_as_none() -> None:
    store = InMemorySettingsStore({FUNCTIONS_WORKER_RUNTIME: runtime_moniker(WorkerRuntime.NONE)})

    assert current_worker_runtime(store, environ={}) is WorkerRuntime.NONE


def test_environment_wins_over_store() -> None:
    store = InMemorySettingsStore({FUNCTIONS_WORKER_RUNTIME: "python"})

    runtime = current_worker_runtime(store, environ={FUNCTIONS_WORKER_RUNTIME: "node"})

    assert runtime is WorkerRuntime.NODE


def test_empty_environment_value_falls_back_to_store() -> None:
    store = InMemorySettingsStore({FUNCTIONS_WORKER_RUNTIME: "powershell"})

    runtime = current_worker_runtime(store, environ={FUNCTIONS_WORKER_RUNTIME: ""})

    assert runtime is WorkerRuntime.POWERSHELL


def test_process_environment_is_default(monkeypatch: pytest.MonkeyPatch, store: InMemorySettingsStore) -> None:
    monkeypatch.setenv(FUNCTIONS_WORKER_RUNTIME, "dotnet-isolated")

    assert current_worker_runtime(store) is WorkerRuntime.DOTNET_ISOLATED


def test_store_key_lookup_ignores_case() -> None:
    store = InMemorySettingsStore({"functions_worker_runtime": "java"})

    assert current_worker_runtime(store, environ={}) is WorkerRuntime.JAVA


def test_set_runtime_persists_moniker(store: InMemorySettingsStore) -> None:
    messages: list[str] = []

    runtime = set_worker_runtime(store, "py", notify=messages.append)

    assert runtime is WorkerRuntime.PYTHON
    assert store.get_value(FUNCTIONS_WORKER_RUNTIME) == "python"
    assert current_worker_runtime(store, environ={}) is WorkerRuntime.PYTHON
    assert messages == ["Worker runtime 'python' has been set."]


def test_set_runtime_writes_isolated_moniker(store: InMemorySettingsStore) -> None:
    set_worker_runtime(store, "c#-isolated", notify=lambda _message: None)

    assert store.get_value(FUNCTIONS_WORKER_RUNTIME) == "dotnet-isolated"


def test_set_runtime_names_settings_file(tmp_path: Path) -> None:
    store = LocalSettingsStore.for_root(tmp_path)
    messages: list[str] = []

    set_worker_runtime(store, "node", notify=messages.append)

    assert messages == [f"Worker runtime 'node' has been set in '{store.path}'."]


def test_set_runtime_default_notification(store: InMemorySettingsStore, capsys: pytest.CaptureFixture[str]) -> None:
    set_worker_runtime(store, "pwsh")

    assert "Worker runtime 'powershell' has been set." in capsys.readouterr().out


@pytest.mark.parametrize(("value", "error"), [("", EmptyInputError), ("cobol", UnrecognizedValueError)])
def test_set_runtime_propagates_failures(
    store: InMemorySettingsStore,
    value: str,
    error: type[Exception],
) -> None:
    with pytest.raises(error):
        set_worker_runtime(store, value, notify=lambda _message: None)

    assert store.get_value(FUNCTIONS_WORKER_RUNTIME) is None
