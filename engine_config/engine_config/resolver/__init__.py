"""Precedence-based resolution of the engine configuration JSON."""

from engine_config.resolver.defaults import PlatformDefaults, platform_defaults
from engine_config.resolver.providers import (
    EnvironmentProvider,
    OverrideProvider,
    ValueProvider,
    first_value,
)
from engine_config.resolver.resolver import (
    DATABASE_URL_KEY,
    build_configuration,
    build_simple_system_configuration_json,
    resolve,
    resolve_from_environment,
)

__all__ = [
    "DATABASE_URL_KEY",
    "EnvironmentProvider",
    "OverrideProvider",
    "PlatformDefaults",
    "ValueProvider",
    "build_configuration",
    "build_simple_system_configuration_json",
    "first_value",
    "platform_defaults",
    "resolve",
    "resolve_from_environment",
]
