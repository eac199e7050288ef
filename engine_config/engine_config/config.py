"""Environment variables consulted when resolving the engine configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

logger = logging.getLogger(__name__)

ENGINE_CONFIGURATION_JSON_ENV = "SENZING_TOOLS_ENGINE_CONFIGURATION_JSON"
LEGACY_ENGINE_CONFIGURATION_JSON_ENV = "SENZING_ENGINE_CONFIGURATION_JSON"
DATABASE_URL_ENV = "SENZING_TOOLS_DATABASE_URL"
LICENSE_STRING_BASE64_ENV = "SENZING_TOOLS_LICENSE_STRING_BASE64"
SENZING_DIRECTORY_ENV = "SENZING_TOOLS_SENZING_DIRECTORY"
CONFIG_PATH_ENV = "SENZING_TOOLS_CONFIG_PATH"
RESOURCE_PATH_ENV = "SENZING_TOOLS_RESOURCE_PATH"
SUPPORT_PATH_ENV = "SENZING_TOOLS_SUPPORT_PATH"

# Semantic override-map key -> Settings attribute.
ATTRIBUTE_FIELDS: dict[str, str] = {
    "licenseStringBase64": "license_string_base64",
    "senzingDirectory": "senzing_directory",
    "configPath": "config_path",
    "resourcePath": "resource_path",
    "supportPath": "support_path",
}


class Settings(BaseSettings):
    """Engine configuration inputs read from ``SENZING_TOOLS_*`` variables.

    Every field is ``None`` when its variable is unset.  An empty string is
    kept as-is so that callers can tell "set but empty" from "unset".
    Variable names are matched exactly; no ``.env`` file is read.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    engine_configuration_json: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            ENGINE_CONFIGURATION_JSON_ENV,
            LEGACY_ENGINE_CONFIGURATION_JSON_ENV,
        ),
    )
    database_url: str | None = Field(default=None, validation_alias=DATABASE_URL_ENV)
    license_string_base64: str | None = Field(default=None, validation_alias=LICENSE_STRING_BASE64_ENV)
    senzing_directory: str | None = Field(default=None, validation_alias=SENZING_DIRECTORY_ENV)
    config_path: str | None = Field(default=None, validation_alias=CONFIG_PATH_ENV)
    resource_path: str | None = Field(default=None, validation_alias=RESOURCE_PATH_ENV)
    support_path: str | None = Field(default=None, validation_alias=SUPPORT_PATH_ENV)

    @property
    def full_configuration_json(self) -> str | None:
        """The complete configuration document, if one was supplied verbatim."""
        return self.engine_configuration_json

    def lookup(self, key: str) -> str | None:
        """Return the non-empty value for semantic *key*, or ``None``.

        An empty variable counts as unset here.  Unknown keys raise
        ``KeyError``.
        """
        value = getattr(self, ATTRIBUTE_FIELDS[key])
        if not value:
            return None
        return value


class _MappingSettings(Settings):
    """Settings built from keyword arguments only, never from ``os.environ``."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from the process environment or from *environ*.

    Passing an explicit mapping gives a fully isolated view: nothing is read
    from ``os.environ`` in that case.
    """
    if environ is None:
        settings = Settings()
    else:
        values = dict(environ)
        # Both aliases of one field may be present; the primary name wins.
        if ENGINE_CONFIGURATION_JSON_ENV in values:
            values.pop(LEGACY_ENGINE_CONFIGURATION_JSON_ENV, None)
        settings = _MappingSettings(**values)

    logger.debug(
        "Loaded settings (full configuration JSON set: %s, database URL set: %s)",
        settings.engine_configuration_json is not None,
        settings.database_url is not None,
    )
    return settings
