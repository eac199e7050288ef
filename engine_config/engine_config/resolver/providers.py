"""Layered value providers for configuration attributes.

A provider answers "what value do you have for this key?" with a string or
``None``.  The resolver asks an ordered tuple of providers and takes the
first answer, which gives override -> environment precedence without
repeating the lookup for every key.  Computed defaults are applied
afterwards, when the document is built.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from engine_config.config import Settings


@runtime_checkable
class ValueProvider(Protocol):
    """A single source of configuration attribute values."""

    @property
    def name(self) -> str:
        """Short label used in log messages."""
        ...

    def lookup(self, key: str) -> str | None:
        """Return the value for semantic *key*, or ``None`` if this source has none."""
        ...


@dataclass(frozen=True, slots=True)
class OverrideProvider:
    """Values passed explicitly by the caller.

    A key that is present wins even when its value is empty.
    """

    overrides: Mapping[str, str]

    @property
    def name(self) -> str:
        return "override"

    def lookup(self, key: str) -> str | None:
        return self.overrides.get(key)


@dataclass(frozen=True, slots=True)
class EnvironmentProvider:
    """Values read from ``SENZING_TOOLS_*`` variables.

    A variable that is set to the empty string is treated as unset.
    """

    settings: Settings

    @property
    def name(self) -> str:
        return "environment"

    def lookup(self, key: str) -> str | None:
        return self.settings.lookup(key)


def first_value(providers: Iterable[ValueProvider], key: str) -> tuple[str, str] | None:
    """Return ``(value, provider name)`` from the first provider that has *key*."""
    for provider in providers:
        value = provider.lookup(key)
        if value is not None:
            return value, provider.name
    return None
