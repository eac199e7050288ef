"""Assemble the engine configuration JSON from overrides, environment and defaults.

If ``SENZING_TOOLS_ENGINE_CONFIGURATION_JSON`` (or the legacy
``SENZING_ENGINE_CONFIGURATION_JSON``) is set, its value is returned
unchanged and nothing else is consulted.

Otherwise every value in the document is taken from, in order of
precedence:

1. the caller's override map,
2. the matching environment variable,
3. a default or calculated value.

=======================  ==========================================
Override key             Environment variable
=======================  ==========================================
``databaseUrl``          ``SENZING_TOOLS_DATABASE_URL``
``licenseStringBase64``  ``SENZING_TOOLS_LICENSE_STRING_BASE64``
``senzingDirectory``     ``SENZING_TOOLS_SENZING_DIRECTORY``
``configPath``           ``SENZING_TOOLS_CONFIG_PATH``
``resourcePath``         ``SENZING_TOOLS_RESOURCE_PATH``
``supportPath``          ``SENZING_TOOLS_SUPPORT_PATH``
=======================  ==========================================

``databaseUrl`` is special: an override is used as-is (it must already be a
backend connection string), while the environment variable holds a generic
URL that goes through :func:`engine_config.transcoder.transcode`.  It has no
default.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping

from engine_config.config import ATTRIBUTE_FIELDS, DATABASE_URL_ENV, Settings, load_settings
from engine_config.errors import MissingEnvironmentVariableError
from engine_config.models import EngineConfiguration, PipelineSection, SqlSection
from engine_config.resolver.defaults import platform_defaults
from engine_config.resolver.providers import (
    EnvironmentProvider,
    OverrideProvider,
    ValueProvider,
    first_value,
)
from engine_config.transcoder import transcode

logger = logging.getLogger(__name__)

DATABASE_URL_KEY = "databaseUrl"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def build_configuration(attributes: Mapping[str, str], platform: str | None = None) -> EngineConfiguration:
    """Build the configuration document from fully resolved *attributes*.

    Paths missing from *attributes* are derived from ``senzingDirectory``,
    which itself falls back to the platform's installation root.  Without a
    ``databaseUrl`` the result is an empty document.
    """
    if DATABASE_URL_KEY not in attributes:
        return EngineConfiguration()

    defaults = platform_defaults(platform)
    root = attributes.get("senzingDirectory", defaults.senzing_directory)

    return EngineConfiguration(
        pipeline=PipelineSection(
            config_path=attributes.get("configPath", defaults.config_path(root)),
            resource_path=attributes.get("resourcePath", defaults.resource_path(root)),
            support_path=attributes.get("supportPath", defaults.support_path(root)),
            license_string_base64=attributes.get("licenseStringBase64", ""),
        ),
        sql=SqlSection(connection=attributes[DATABASE_URL_KEY]),
    )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _resolve_database_url(overrides: Mapping[str, str], settings: Settings) -> str:
    if DATABASE_URL_KEY in overrides:
        logger.debug("databaseUrl taken from override")
        return overrides[DATABASE_URL_KEY]

    if settings.database_url is None:
        raise MissingEnvironmentVariableError(DATABASE_URL_ENV)

    logger.debug("databaseUrl taken from %s", DATABASE_URL_ENV)
    return transcode(settings.database_url)


def resolve(
    overrides: Mapping[str, str] | None = None,
    *,
    settings: Settings | None = None,
    platform: str | None = None,
) -> str:
    """Return the engine configuration JSON.

    Parameters
    ----------
    overrides:
        Semantic key to value.  Keys that are absent fall through to the
        environment and then to defaults.  Not modified.
    settings:
        Environment view to use; loaded from ``os.environ`` when omitted.
    platform:
        ``sys.platform``-style name selecting the default installation
        paths; the current platform when omitted.

    Returns
    -------
    str
        The compact JSON document.

    Raises
    ------
    MissingEnvironmentVariableError
        If no ``databaseUrl`` override is given and
        ``SENZING_TOOLS_DATABASE_URL`` is not set.
    MalformedURLError
        If ``SENZING_TOOLS_DATABASE_URL`` is not a parseable URL.
    """
    if settings is None:
        settings = load_settings()

    full_json = settings.full_configuration_json
    if full_json is not None:
        logger.debug("Using engine configuration JSON supplied verbatim by the environment")
        return full_json

    overrides = dict(overrides or {})
    attributes: dict[str, str] = {DATABASE_URL_KEY: _resolve_database_url(overrides, settings)}

    providers: tuple[ValueProvider, ...] = (OverrideProvider(overrides), EnvironmentProvider(settings))
    for key in ATTRIBUTE_FIELDS:
        found = first_value(providers, key)
        if found is None:
            logger.debug("%s not supplied; using computed default", key)
            continue
        value, source = found
        logger.debug("%s taken from %s", key, source)
        attributes[key] = value

    return build_configuration(attributes, platform).to_json()


def resolve_from_environment(
    *,
    settings: Settings | None = None,
    platform: str | None = None,
) -> str:
    """Resolve using environment variables and defaults only."""
    return resolve({}, settings=settings, platform=platform)


def build_simple_system_configuration_json(
    database_url: str,
    *,
    settings: Settings | None = None,
    platform: str | None = None,
) -> str:
    """Resolve with only a generic database URL supplied.

    .. deprecated::
        Use :func:`resolve` or :func:`resolve_from_environment` instead.
    """
    warnings.warn(
        "build_simple_system_configuration_json() is deprecated; use resolve() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return resolve({DATABASE_URL_KEY: transcode(database_url)}, settings=settings, platform=platform)
