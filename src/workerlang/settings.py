# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings stores holding the persisted worker runtime selection."""

from __future__ import annotations

import json
from abc import abstractmethod
from pathlib import Path
from typing import Protocol, TypeAlias, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import LOCAL_SETTINGS_FILE_NAME

SettingValue: TypeAlias = str | int | float | bool | None

_T = TypeVar("_T")


class SettingsError(RuntimeError):
    """Raised when a settings file exists but cannot be parsed."""


@runtime_checkable
class SettingsStore(Protocol):
    """Flat string key/value store consulted for persisted settings."""

    @abstractmethod
    def get_value(self, key: str) -> str | None:
        """Return the value stored under ``key`` or ``None`` when absent."""
        raise NotImplementedError

    @abstractmethod
    def set_value(self, key: str, value: str) -> None:
        """Persist ``value`` under ``key``."""
        raise NotImplementedError


def _lookup(values: dict[str, _T], key: str) -> _T | None:
    folded = key.casefold()
    for candidate, value in values.items():
        if candidate.casefold() == folded:
            return value
    return None


def _replace(values: dict[str, _T], key: str, value: _T) -> None:
    folded = key.casefold()
    for candidate in [name for name in values if name.casefold() == folded]:
        del values[candidate]
    values[key] = value


class InMemorySettingsStore:
    """Dictionary backed store with case-insensitive keys."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get_value(self, key: str) -> str | None:
        return _lookup(self._values, key)

    def set_value(self, key: str, value: str) -> None:
        _replace(self._values, key, value)

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the stored values."""

        return dict(self._values)


class LocalSettings(BaseModel):
    """Use this model to represent the contents of ``local.settings.json``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    is_encrypted: bool = Field(default=False, alias="IsEncrypted")
    values: dict[str, SettingValue] = Field(default_factory=dict, alias="Values")


class LocalSettingsStore:
    """Store backed by the ``local.settings.json`` file of a project root.

    A missing file reads as empty and is created on the first write. Unknown
    top-level sections are preserved when the file is rewritten. Non-string
    scalars under ``Values`` are kept as written and read back as strings.
    """

    def __init__(self, path: Path) -> None:
        """Bind the store to ``path``.

        Args:
            path: Location of the settings file.
        """

        self._path = path

    @classmethod
    def for_root(cls, root: Path) -> LocalSettingsStore:
        """Return a store for the settings file inside ``root``."""

        return cls(root / LOCAL_SETTINGS_FILE_NAME)

    @property
    def path(self) -> Path:
        """Return the settings file location."""

        return self._path

    def load(self) -> LocalSettings:
        """Return the parsed settings file.

        Returns:
            LocalSettings: File contents, or defaults when the file is missing.

        Raises:
            SettingsError: If the file is not valid JSON or fails validation.
        """

        if not self._path.exists():
            return LocalSettings()
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
            return LocalSettings.model_validate(payload)
        except (json.JSONDecodeError, ValidationError) as exc:
            raise SettingsError(f"Failed to parse {self._path}: {exc}") from exc

    def get_value(self, key: str) -> str | None:
        value = _lookup(self.load().values, key)
        if value is None:
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def set_value(self, key: str, value: str) -> None:
        settings = self.load()
        _replace(settings.values, key, value)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = settings.model_dump(by_alias=True)
        self._path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


__all__ = [
    "InMemorySettingsStore",
    "LocalSettings",
    "LocalSettingsStore",
    "SettingsError",
    "SettingsStore",
]
