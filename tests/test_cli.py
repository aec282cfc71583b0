# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the workerlang commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from workerlang.cli.app import app
from workerlang.constants import FUNCTIONS_WORKER_RUNTIME, LOCAL_SETTINGS_FILE_NAME


def _write_settings(root: Path, runtime: str) -> None:
    payload = {"IsEncrypted": False, "Values": {FUNCTIONS_WORKER_RUNTIME: runtime}}
    (root / LOCAL_SETTINGS_FILE_NAME).write_text(json.dumps(payload), encoding="utf-8")


def test_set_command_persists_runtime(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["set", "py", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 0
    payload = json.loads((tmp_path / LOCAL_SETTINGS_FILE_NAME).read_text(encoding="utf-8"))
    assert payload["Values"][FUNCTIONS_WORKER_RUNTIME] == "python"
    assert "Worker runtime 'python' has been set" in result.stdout
    assert "Using worker runtime python." in result.stdout
    assert "✅" not in result.stdout


def test_set_command_rejects_unknown_runtime(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["set", "cobol", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "Options are" in result.stdout
    assert not (tmp_path / LOCAL_SETTINGS_FILE_NAME).exists()


def test_show_command_reports_detected_runtime(tmp_path: Path) -> None:
    _write_settings(tmp_path, "node")
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--root", str(tmp_path)])

    assert result.exit_code == 0
    assert "javascript" in result.stdout
    assert "typescript" in result.stdout


def test_show_command_prefers_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _write_settings(tmp_path, "node")
    monkeypatch.setenv(FUNCTIONS_WORKER_RUNTIME, "dotnet-isolated")
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--root", str(tmp_path)])

    assert result.exit_code == 0
    assert "csharp-isolated" in result.stdout


def test_show_command_without_settings(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["show", "--root", str(tmp_path)])

    assert result.exit_code == 0
    assert "None" in result.stdout
    assert "n/a" in result.stdout


def test_normalize_command() -> None:
    runner = CliRunner()

    runtime = runner.invoke(app, ["normalize", "C#-isolated"])
    language = runner.invoke(app, ["normalize", "node", "--language"])
    failure = runner.invoke(app, ["normalize", "   ", "--no-emoji"])

    assert runtime.exit_code == 0
    assert runtime.stdout.strip() == "dotnetIsolated"
    assert language.stdout.strip() == "javascript"
    assert failure.exit_code == 1
    assert "cannot be null or empty" in failure.stdout


def test_list_command_hides_java() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "dotnet-isolated" in result.stdout
    assert "powershell" in result.stdout
    first_cells = [line.split()[0] for line in result.stdout.splitlines() if line.strip()]
    assert "java" not in first_cells
