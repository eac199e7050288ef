"""Domain models for the engine configuration document."""

from engine_config.models.configuration import (
    SINGLE_DATABASE_BACKEND,
    EngineConfiguration,
    PipelineSection,
    SqlSection,
    encode_html_safe,
)

__all__ = [
    "SINGLE_DATABASE_BACKEND",
    "EngineConfiguration",
    "PipelineSection",
    "SqlSection",
    "encode_html_safe",
]
