"""Sanity checks for a resolved engine configuration document."""

from __future__ import annotations

import logging

from engine_config.parser import ConfigurationParser

logger = logging.getLogger(__name__)


def verify_configuration_json(engine_configuration_json: str) -> None:
    """Check that the document is valid JSON with well-formed sections.

    Does not look at the file system or the database.

    Raises
    ------
    InvalidJSONError
        If the document is not valid JSON.
    SchemaError
        If ``PIPELINE`` or ``SQL`` has the wrong shape.
    """
    configuration = ConfigurationParser(engine_configuration_json).configuration()
    logger.debug(
        "Verified engine configuration (multi-database: %s)",
        configuration.sql.is_multi_database,
    )
