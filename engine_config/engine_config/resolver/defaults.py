"""Platform-conventional installation paths."""

from __future__ import annotations

import sys
from dataclasses import dataclass

CONFIG_SUBDIRECTORY = "etc"
RESOURCE_SUBDIRECTORY = "resources"
SUPPORT_SUBDIRECTORY = "data"


@dataclass(frozen=True, slots=True)
class PlatformDefaults:
    """Installation root and path separator for one family of platforms."""

    senzing_directory: str
    separator: str

    def join(self, root: str, name: str) -> str:
        # Plain concatenation: a trailing separator on *root* is kept.
        return f"{root}{self.separator}{name}"

    def config_path(self, root: str) -> str:
        return self.join(root, CONFIG_SUBDIRECTORY)

    def resource_path(self, root: str) -> str:
        return self.join(root, RESOURCE_SUBDIRECTORY)

    def support_path(self, root: str) -> str:
        return self.join(root, SUPPORT_SUBDIRECTORY)


POSIX_DEFAULTS = PlatformDefaults(senzing_directory="/opt/senzing/g2", separator="/")
WINDOWS_DEFAULTS = PlatformDefaults(senzing_directory="C:\\Program Files\\Senzing\\g2", separator="\\")


def platform_defaults(platform: str | None = None) -> PlatformDefaults:
    """Return the defaults for *platform* (a ``sys.platform`` value, current platform if omitted)."""
    if platform is None:
        platform = sys.platform
    if platform.startswith("win"):
        return WINDOWS_DEFAULTS
    return POSIX_DEFAULTS
