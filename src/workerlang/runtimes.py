# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Worker runtime and language canonicalisation registry.

The module loads two alias tables at import time, one resolving free-form
strings to :class:`WorkerRuntime` members and one resolving them to canonical
template languages. Both tables are read-only after import and may be shared
freely between threads.

Two failure policies coexist. :func:`normalize_worker_runtime`,
:func:`normalize_language` and :func:`set_worker_runtime` raise
:class:`~workerlang.errors.WorkerRuntimeError` subclasses on bad input, while
:func:`current_worker_runtime` degrades to :attr:`WorkerRuntime.NONE` and
:func:`runtime_moniker` never raises.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final, TypeVar

from .constants import (
    DOTNET_DISPLAY_NAME,
    DOTNET_ISOLATED_DISPLAY_NAME,
    FUNCTIONS_WORKER_RUNTIME,
    LANGUAGE_ALIASES,
    NONE_MONIKER,
    WORKER_RUNTIME_ALIASES,
    Languages,
)
from .errors import (
    AliasConflictError,
    EmptyInputError,
    UnrecognizedValueError,
    UnsupportedForTemplatesError,
)
from .logging import warn
from .settings import SettingsStore

LOGGER = logging.getLogger(__name__)

_V = TypeVar("_V")


class WorkerRuntime(str, Enum):
    """Enumerate the execution backends a function app can target."""

    NONE = "none"
    DOTNET = "dotnet"
    DOTNET_ISOLATED = "dotnetIsolated"
    NODE = "node"
    PYTHON = "python"
    JAVA = "java"
    POWERSHELL = "powershell"
    CUSTOM = "custom"


class AliasKind(str, Enum):
    """Select which alias table :func:`normalize` consults."""

    RUNTIME = "runtime"
    LANGUAGE = "language"


class AliasTable(Mapping[str, _V]):
    """Read-only mapping from alias strings to canonical values.

    Keys keep the spelling they were declared with; lookups ignore case.
    """

    def __init__(self, label: str, entries: Iterable[tuple[_V, Iterable[str]]]) -> None:
        """Load ``entries`` rejecting aliases declared more than once.

        Args:
            label: Table name used in conflict messages.
            entries: Pairs of canonical value and its aliases. The canonical
                value's own string form is registered as an alias of itself.

        Raises:
            AliasConflictError: If two entries share an alias, ignoring case.
        """

        aliases: dict[str, _V] = {}
        folded: dict[str, str] = {}
        for value, names in entries:
            for alias in (*names, str(getattr(value, "value", value))):
                key = alias.casefold()
                if key in folded:
                    raise AliasConflictError(
                        f"{label} alias '{alias}' is already registered as '{folded[key]}'",
                    )
                folded[key] = alias
                aliases[alias] = value
        self._label = label
        self._aliases = MappingProxyType(aliases)
        self._folded = MappingProxyType(folded)

    @property
    def label(self) -> str:
        """Return the table name used in diagnostics."""

        return self._label

    def __getitem__(self, alias: str) -> _V:
        return self._aliases[self._folded[alias.casefold()]]

    def __iter__(self) -> Iterator[str]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)


RUNTIME_ALIASES: Final[AliasTable[WorkerRuntime]] = AliasTable(
    "Worker runtime",
    ((WorkerRuntime(name), aliases) for name, aliases in WORKER_RUNTIME_ALIASES),
)

LANGUAGE_TABLE: Final[AliasTable[str]] = AliasTable("Language", LANGUAGE_ALIASES)

_DEFAULT_TEMPLATE_LANGUAGE: Final[Mapping[WorkerRuntime, str]] = MappingProxyType(
    {
        WorkerRuntime.DOTNET: Languages.CSHARP,
        WorkerRuntime.DOTNET_ISOLATED: Languages.CSHARP_ISOLATED,
        WorkerRuntime.NODE: Languages.JAVASCRIPT,
        WorkerRuntime.PYTHON: Languages.PYTHON,
        WorkerRuntime.POWERSHELL: Languages.POWERSHELL,
        WorkerRuntime.CUSTOM: Languages.CUSTOM,
    },
)

_SUPPORTED_LANGUAGES: Final[Mapping[WorkerRuntime, tuple[str, ...]]] = MappingProxyType(
    {
        WorkerRuntime.NODE: (Languages.JAVASCRIPT, Languages.TYPESCRIPT),
        WorkerRuntime.DOTNET: (Languages.CSHARP, Languages.FSHARP),
        WorkerRuntime.DOTNET_ISOLATED: (Languages.CSHARP_ISOLATED, Languages.FSHARP_ISOLATED),
    },
)

_MONIKERS: Final[Mapping[WorkerRuntime, str]] = MappingProxyType(
    {
        WorkerRuntime.NONE: NONE_MONIKER,
        WorkerRuntime.DOTNET: "dotnet",
        WorkerRuntime.DOTNET_ISOLATED: "dotnet-isolated",
        WorkerRuntime.NODE: "node",
        WorkerRuntime.PYTHON: "python",
        WorkerRuntime.JAVA: "java",
        WorkerRuntime.POWERSHELL: "powershell",
        WorkerRuntime.CUSTOM: "custom",
    },
)


def available_worker_runtimes() -> tuple[WorkerRuntime, ...]:
    """Return runtimes offered to users, in declaration order.

    Returns:
        tuple[WorkerRuntime, ...]: Registered runtimes excluding ``java``.
    """

    seen = dict.fromkeys(RUNTIME_ALIASES.values())
    return tuple(runtime for runtime in seen if runtime is not WorkerRuntime.JAVA)


def available_worker_runtimes_text() -> str:
    """Return the comma separated monikers of :func:`available_worker_runtimes`."""

    return ", ".join(runtime_moniker(runtime) for runtime in available_worker_runtimes())


def worker_display_strings() -> dict[WorkerRuntime, str]:
    """Return human readable labels for each available runtime.

    Returns:
        dict[WorkerRuntime, str]: Labels keyed by runtime; the two .NET
        hosting models are spelled out, everything else uses its moniker.
    """

    labels: dict[WorkerRuntime, str] = {}
    for runtime in available_worker_runtimes():
        if runtime is WorkerRuntime.DOTNET:
            labels[runtime] = DOTNET_DISPLAY_NAME
        elif runtime is WorkerRuntime.DOTNET_ISOLATED:
            labels[runtime] = DOTNET_ISOLATED_DISPLAY_NAME
        else:
            labels[runtime] = runtime_moniker(runtime)
    return labels


def language_aliases() -> tuple[str, ...]:
    """Return every string accepted by :func:`normalize_language`."""

    return tuple(LANGUAGE_TABLE)


def normalize_worker_runtime(value: str | None) -> WorkerRuntime:
    """Resolve ``value`` to a :class:`WorkerRuntime`.

    Matching is an exact, case-insensitive comparison against the runtime
    alias table; surrounding whitespace is not stripped.

    Args:
        value: Runtime name, moniker or language alias supplied by the user.

    Returns:
        WorkerRuntime: Runtime registered for ``value``.

    Raises:
        EmptyInputError: If ``value`` is ``None`` or blank.
        UnrecognizedValueError: If ``value`` matches no alias.
    """

    if value is None or not value.strip():
        raise EmptyInputError("worker_runtime", "Worker runtime cannot be null or empty.")
    try:
        return RUNTIME_ALIASES[value]
    except KeyError:
        options = tuple(runtime_moniker(runtime) for runtime in available_worker_runtimes())
        raise UnrecognizedValueError(
            value,
            options,
            f"Worker runtime '{value}' is not a valid option. Options are {available_worker_runtimes_text()}",
        ) from None


def try_normalize_worker_runtime(value: str | None) -> WorkerRuntime | None:
    """Return the runtime for ``value`` or ``None`` when it cannot be resolved."""

    if value is None or not value.strip():
        return None
    return RUNTIME_ALIASES.get(value)


def normalize_language(value: str | None) -> str:
    """Resolve ``value`` to a canonical language identifier.

    Args:
        value: Language name or alias supplied by the user.

    Returns:
        str: Canonical language such as ``javascript`` or ``csharp-isolated``.

    Raises:
        EmptyInputError: If ``value`` is ``None`` or blank.
        UnrecognizedValueError: If ``value`` matches no language alias.
    """

    if value is None or not value.strip():
        raise EmptyInputError("language", "Language can't be empty.")
    try:
        return LANGUAGE_TABLE[value]
    except KeyError:
        options = language_aliases()
        raise UnrecognizedValueError(
            value,
            options,
            f"Language '{value}' is not available. Available language strings are {', '.join(options)}",
        ) from None


def normalize(value: str | None, kind: AliasKind) -> WorkerRuntime | str:
    """Resolve ``value`` against the alias table selected by ``kind``."""

    if kind is AliasKind.RUNTIME:
        return normalize_worker_runtime(value)
    return normalize_language(value)


def runtime_moniker(runtime: WorkerRuntime) -> str:
    """Return the string persisted for ``runtime``; unknown input maps to ``None``."""

    return _MONIKERS.get(runtime, NONE_MONIKER)


def default_template_language(runtime: WorkerRuntime) -> str:
    """Return the template language used when a project does not pick one.

    Raises:
        UnsupportedForTemplatesError: If ``runtime`` has no default language,
            which is the case for ``java`` and ``none``.
    """

    try:
        return _DEFAULT_TEMPLATE_LANGUAGE[runtime]
    except KeyError:
        raise UnsupportedForTemplatesError(getattr(runtime, "value", str(runtime))) from None


def supported_languages(runtime: WorkerRuntime) -> tuple[str, ...]:
    """Return the canonical languages ``runtime`` accepts, empty when undeclared."""

    return _SUPPORTED_LANGUAGES.get(runtime, ())


def aliases_for_runtime(runtime: WorkerRuntime) -> Iterator[str]:
    """Yield every alias that resolves to ``runtime``.

    Callers must not rely on the order of the yielded aliases.
    """

    return (alias for alias, value in RUNTIME_ALIASES.items() if value == runtime)


def current_worker_runtime(
    store: SettingsStore,
    *,
    environ: Mapping[str, str] | None = None,
) -> WorkerRuntime:
    """Detect the project's runtime without failing.

    The ``FUNCTIONS_WORKER_RUNTIME`` environment variable wins over the value
    persisted in ``store``. Missing or unrecognised values yield
    :attr:`WorkerRuntime.NONE`.

    Args:
        store: Settings store holding the persisted runtime moniker.
        environ: Environment mapping, defaulting to :data:`os.environ`.

    Returns:
        WorkerRuntime: Detected runtime or :attr:`WorkerRuntime.NONE`.
    """

    env = os.environ if environ is None else environ
    setting = env.get(FUNCTIONS_WORKER_RUNTIME) or store.get_value(FUNCTIONS_WORKER_RUNTIME)
    runtime = try_normalize_worker_runtime(setting)
    if runtime is None:
        LOGGER.debug("Worker runtime %r is not recognised; assuming none", setting)
        return WorkerRuntime.NONE
    return runtime


def _default_notify(message: str) -> None:
    warn(message, use_emoji=False)


def set_worker_runtime(
    store: SettingsStore,
    value: str | None,
    *,
    notify: Callable[[str], None] | None = None,
) -> WorkerRuntime:
    """Persist the runtime selected by ``value`` and announce it.

    Args:
        store: Settings store receiving the runtime moniker.
        value: Runtime or language alias supplied by the user.
        notify: Callback receiving the advisory line. Defaults to a warning
            printed on the console.

    Returns:
        WorkerRuntime: Runtime that was persisted.

    Raises:
        EmptyInputError: If ``value`` is ``None`` or blank.
        UnrecognizedValueError: If ``value`` matches no alias.
    """

    runtime = normalize_worker_runtime(value)
    moniker = runtime_moniker(runtime)
    store.set_value(FUNCTIONS_WORKER_RUNTIME, moniker)
    location = getattr(store, "path", None)
    target = f" in '{location}'" if location is not None else ""
    (notify or _default_notify)(f"Worker runtime '{moniker}' has been set{target}.")
    return runtime


def is_dotnet(runtime: WorkerRuntime) -> bool:
    """Return ``True`` for either .NET hosting model."""

    return runtime in (WorkerRuntime.DOTNET, WorkerRuntime.DOTNET_ISOLATED)


def is_dotnet_isolated(runtime: WorkerRuntime) -> bool:
    """Return ``True`` only for the isolated .NET worker."""

    return runtime == WorkerRuntime.DOTNET_ISOLATED


__all__ = [
    "LANGUAGE_TABLE",
    "RUNTIME_ALIASES",
    "AliasKind",
    "AliasTable",
    "WorkerRuntime",
    "aliases_for_runtime",
    "available_worker_runtimes",
    "available_worker_runtimes_text",
    "current_worker_runtime",
    "default_template_language",
    "is_dotnet",
    "is_dotnet_isolated",
    "language_aliases",
    "normalize",
    "normalize_language",
    "normalize_worker_runtime",
    "runtime_moniker",
    "set_worker_runtime",
    "supported_languages",
    "try_normalize_worker_runtime",
]
