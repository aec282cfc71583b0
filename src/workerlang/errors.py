# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while resolving worker runtimes and languages."""

from __future__ import annotations

from collections.abc import Iterable


class WorkerRuntimeError(ValueError):
    """Base class for user-facing runtime and language resolution failures."""


class EmptyInputError(WorkerRuntimeError):
    """Raised when a runtime or language value is missing or blank."""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter


class UnrecognizedValueError(WorkerRuntimeError):
    """Raised when a value matches no registered alias."""

    def __init__(self, value: str, options: Iterable[str], message: str) -> None:
        super().__init__(message)
        self.value = value
        self.options = tuple(options)


class UnsupportedForTemplatesError(WorkerRuntimeError):
    """Raised when a runtime has no default template language."""

    def __init__(self, runtime: str) -> None:
        super().__init__(f"Worker runtime '{runtime}' is not a valid worker for a template.")
        self.runtime = runtime


class AliasConflictError(RuntimeError):
    """Raised when an alias table declares the same alias twice."""


__all__ = [
    "AliasConflictError",
    "EmptyInputError",
    "UnrecognizedValueError",
    "UnsupportedForTemplatesError",
    "WorkerRuntimeError",
]
