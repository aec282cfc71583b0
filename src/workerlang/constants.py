# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across workerlang modules."""

from __future__ import annotations

from typing import Final

FUNCTIONS_WORKER_RUNTIME: Final[str] = "FUNCTIONS_WORKER_RUNTIME"
LOCAL_SETTINGS_FILE_NAME: Final[str] = "local.settings.json"
NONE_MONIKER: Final[str] = "None"


class Languages:
    """Canonical language identifiers understood by the templates."""

    CSHARP: Final[str] = "csharp"
    CSHARP_ISOLATED: Final[str] = "csharp-isolated"
    FSHARP: Final[str] = "fsharp"
    FSHARP_ISOLATED: Final[str] = "fsharp-isolated"
    JAVASCRIPT: Final[str] = "javascript"
    TYPESCRIPT: Final[str] = "typescript"
    PYTHON: Final[str] = "python"
    POWERSHELL: Final[str] = "powershell"
    JAVA: Final[str] = "java"
    CUSTOM: Final[str] = "custom"


# Keyed by WorkerRuntime value; order is the order runtimes are offered to users.
WORKER_RUNTIME_ALIASES: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    ("dotnetIsolated", ("dotnet-isolated", "c#-isolated", "csharp-isolated", "f#-isolated", "fsharp-isolated")),
    ("dotnet", ("c#", "csharp", "f#", "fsharp")),
    ("node", ("js", "javascript", "typescript", "ts")),
    ("python", ("py",)),
    ("java", ()),
    ("powershell", ("pwsh",)),
    ("custom", ()),
)

# Keyed by canonical language; "node" resolves to javascript.
LANGUAGE_ALIASES: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    (Languages.JAVASCRIPT, ("js", "node")),
    (Languages.TYPESCRIPT, ("ts",)),
    (Languages.PYTHON, ("py",)),
    (Languages.POWERSHELL, ("pwsh",)),
    (Languages.CSHARP, ("c#", "dotnet")),
    (Languages.CSHARP_ISOLATED, ("c#-isolated", "dotnet-isolated", "dotnetIsolated")),
    (Languages.FSHARP, ("f#",)),
    (Languages.FSHARP_ISOLATED, ("f#-isolated",)),
    (Languages.JAVA, ()),
    (Languages.CUSTOM, ()),
)

DOTNET_DISPLAY_NAME: Final[str] = "dotnet (in-process model)"
DOTNET_ISOLATED_DISPLAY_NAME: Final[str] = "dotnet (isolated worker model)"

__all__ = [
    "DOTNET_DISPLAY_NAME",
    "DOTNET_ISOLATED_DISPLAY_NAME",
    "FUNCTIONS_WORKER_RUNTIME",
    "LANGUAGE_ALIASES",
    "LOCAL_SETTINGS_FILE_NAME",
    "Languages",
    "NONE_MONIKER",
    "WORKER_RUNTIME_ALIASES",
]
