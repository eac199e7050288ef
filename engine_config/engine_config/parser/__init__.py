"""Parsing of engine configuration JSON documents."""

from engine_config.parser.configuration_parser import (
    DATABASE_KEY,
    ConfigurationParser,
    is_json,
    loads,
)

__all__ = [
    "DATABASE_KEY",
    "ConfigurationParser",
    "is_json",
    "loads",
]
