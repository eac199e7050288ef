"""Build and parse the engine configuration JSON used to initialise a client runtime.

Usage::

    from engine_config import ConfigurationParser, resolve, transcode

    transcode("postgresql://user:pw@db:5432/G2")   # 'postgresql://user:pw@db:5432:G2/'
    document = resolve({"configPath": "/etc/opt/senzing"})
    ConfigurationParser(document).get_database_urls()
"""

from engine_config.config import Settings, load_settings
from engine_config.errors import (
    EngineConfigurationError,
    InvalidJSONError,
    MalformedURLError,
    MissingEnvironmentVariableError,
    SchemaError,
)
from engine_config.jsonutil import normalize, normalize_and_sort
from engine_config.models import EngineConfiguration, PipelineSection, SqlSection
from engine_config.parser import ConfigurationParser
from engine_config.resolver import (
    build_simple_system_configuration_json,
    resolve,
    resolve_from_environment,
)
from engine_config.transcoder import Backend, transcode
from engine_config.verifier import verify_configuration_json

__version__ = "0.1.0"

__all__ = [
    "Backend",
    "ConfigurationParser",
    "EngineConfiguration",
    "EngineConfigurationError",
    "InvalidJSONError",
    "MalformedURLError",
    "MissingEnvironmentVariableError",
    "PipelineSection",
    "SchemaError",
    "Settings",
    "SqlSection",
    "build_simple_system_configuration_json",
    "load_settings",
    "normalize",
    "normalize_and_sort",
    "resolve",
    "resolve_from_environment",
    "transcode",
    "verify_configuration_json",
]
