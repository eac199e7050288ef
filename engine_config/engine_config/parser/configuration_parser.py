"""Read fields back out of an engine configuration JSON document.

The parser validates JSON syntax once, at construction, and then re-parses
the stored text on every accessor call so that each call is independent and
free of side effects.

Section and field names are matched exactly first and then
case-insensitively, the way the client runtime itself reads the document
(``"pipeline"`` finds ``PIPELINE``).

Multi-database documents name a backend in ``SQL.BACKEND``; the top-level
entry of that name maps table groups to further top-level entries, each of
which holds a ``DB_1`` database URL::

    {
        "SQL": {"BACKEND": "HYBRID", "CONNECTION": "postgresql://...:G2/"},
        "HYBRID": {"RES_FEAT": "C1", "RES_FEAT_EKEY": "C1", "LIB_FEAT": "C2"},
        "C1": {"CLUSTER_SIZE": "1", "DB_1": "postgresql://...:G2_RES/"},
        "C2": {"CLUSTER_SIZE": "1", "DB_1": "postgresql://...:G2_LIB/"}
    }
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from engine_config.errors import InvalidJSONError, SchemaError
from engine_config.models import EngineConfiguration

logger = logging.getLogger(__name__)

DATABASE_KEY = "DB_1"

_SECTION_FIELDS: dict[str, tuple[str, ...]] = {
    "PIPELINE": ("CONFIGPATH", "LICENSESTRINGBASE64", "RESOURCEPATH", "SUPPORTPATH"),
    "SQL": ("BACKEND", "CONNECTION"),
}


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def loads(text: str) -> Any:
    """``json.loads`` that also rejects ``NaN``, ``Infinity`` and ``-Infinity``."""
    return json.loads(text, parse_constant=_reject_constant)


def _unquote(text: str) -> str | None:
    """Return the contents of a quoted string literal, or ``None``.

    Accepts a double-quoted literal with JSON escapes or a back-quoted raw
    literal.
    """
    if len(text) >= 2 and text[0] == text[-1] == "`" and "`" not in text[1:-1]:
        return text[1:-1]
    if len(text) >= 2 and text[0] == text[-1] == '"':
        try:
            value = json.loads(text)
        except ValueError:
            return None
        if isinstance(value, str):
            return value
    return None


def is_json(text: str) -> bool:
    """True if *text*, or the string literal it quotes, is valid JSON."""
    unquoted = _unquote(text)
    candidate = text if unquoted is None else unquoted
    try:
        loads(candidate)
    except (ValueError, RecursionError):
        return False
    return True


def _get_folded(mapping: dict[str, Any], name: str) -> tuple[bool, Any]:
    """Look up *name* exactly, then case-insensitively."""
    if name in mapping:
        return True, mapping[name]
    lowered = name.lower()
    for key, value in mapping.items():
        if key.lower() == lowered:
            return True, value
    return False, None


def _wire_sections(document: dict[str, Any]) -> dict[str, Any]:
    """Extract the modelled sections, re-keyed with their canonical wire names."""
    wire: dict[str, Any] = {}
    for section, fields in _SECTION_FIELDS.items():
        found, raw_section = _get_folded(document, section)
        if not found or raw_section is None:
            continue
        if not isinstance(raw_section, dict):
            raise SchemaError(f"{section} must be a JSON object, got {type(raw_section).__name__}")
        wire[section] = {}
        for field in fields:
            found, value = _get_folded(raw_section, field)
            if found and value is not None:
                wire[section][field] = value
    return wire


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class ConfigurationParser:
    """Typed accessors over an engine configuration JSON document.

    Parameters
    ----------
    engine_configuration_json:
        The document text.

    Raises
    ------
    InvalidJSONError
        If the text is not valid JSON.
    """

    def __init__(self, engine_configuration_json: str) -> None:
        if not is_json(engine_configuration_json):
            raise InvalidJSONError(engine_configuration_json)
        self._engine_configuration_json = engine_configuration_json

    @property
    def engine_configuration_json(self) -> str:
        return self._engine_configuration_json

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._engine_configuration_json)} chars)"

    # -- parsing ------------------------------------------------------------

    def _document(self) -> dict[str, Any]:
        try:
            document = loads(self._engine_configuration_json)
        except (ValueError, RecursionError) as exc:
            # Quoted documents pass the constructor check but do not decode to an object.
            raise SchemaError(f"configuration is not a JSON object: {exc}") from exc
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise SchemaError(f"configuration must be a JSON object, got {type(document).__name__}")
        return document

    def configuration(self) -> EngineConfiguration:
        """Parse the ``PIPELINE`` and ``SQL`` sections.

        Raises
        ------
        SchemaError
            If a section or field has the wrong type.
        """
        try:
            return EngineConfiguration.model_validate(_wire_sections(self._document()))
        except ValidationError as exc:
            raise SchemaError(f"invalid engine configuration: {exc}") from exc

    # -- accessors ----------------------------------------------------------

    def get_config_path(self) -> str:
        """``PIPELINE.CONFIGPATH``, or ``""`` if absent."""
        return self.configuration().pipeline.config_path

    def get_resource_path(self) -> str:
        """``PIPELINE.RESOURCEPATH``, or ``""`` if absent."""
        return self.configuration().pipeline.resource_path

    def get_support_path(self) -> str:
        """``PIPELINE.SUPPORTPATH``, or ``""`` if absent."""
        return self.configuration().pipeline.support_path

    def get_license_string_base64(self) -> str:
        """``PIPELINE.LICENSESTRINGBASE64``, or ``""`` if absent."""
        return self.configuration().pipeline.license_string_base64

    def get_connection(self) -> str:
        """``SQL.CONNECTION``, or ``""`` if absent."""
        return self.configuration().sql.connection

    def get_backend(self) -> str:
        """``SQL.BACKEND``, or ``""`` if absent."""
        return self.configuration().sql.backend

    def get_database_urls(self) -> list[str]:
        """Return every database the configuration refers to.

        The list starts with ``SQL.CONNECTION``.  In multi-database mode the
        ``DB_1`` value of each entry referenced by the backend map follows,
        in document order, with duplicates removed.  Only ``DB_1`` is read
        from each entry.

        Raises
        ------
        SchemaError
            If the backend map or a referenced entry is missing, or a value
            has the wrong type.
        """
        configuration = self.configuration()
        result = [configuration.sql.connection]

        if not configuration.sql.is_multi_database:
            return result

        backend = configuration.sql.backend
        document = self._document()

        backend_map = document.get(backend)
        if not isinstance(backend_map, dict):
            raise SchemaError(f"backend {backend!r} must name a top-level JSON object")

        database_keys: list[str] = []
        for group, database_key in backend_map.items():
            if not isinstance(database_key, str):
                raise SchemaError(f"{backend}.{group} must be a string")
            if database_key not in database_keys:
                database_keys.append(database_key)

        for database_key in database_keys:
            database_entry = document.get(database_key)
            if not isinstance(database_entry, dict):
                raise SchemaError(f"database entry {database_key!r} must be a top-level JSON object")
            database_name = database_entry.get(DATABASE_KEY)
            if not isinstance(database_name, str):
                raise SchemaError(f"{database_key}.{DATABASE_KEY} must be a string")
            if database_name not in result:
                result.append(database_name)

        logger.debug("Found %d database(s) for backend %s", len(result), backend)
        return result
