"""Engine configuration document models.

The document is consumed by a separate client runtime, so the wire key
names, their nesting and their order are a compatibility contract::

    {
        "PIPELINE": {
            "CONFIGPATH": "/opt/senzing/g2/etc",
            "LICENSESTRINGBASE64": "...",          # omitted when empty
            "RESOURCEPATH": "/opt/senzing/g2/resources",
            "SUPPORTPATH": "/opt/senzing/g2/data"
        },
        "SQL": {
            "BACKEND": "HYBRID",                   # omitted when empty
            "CONNECTION": "postgresql://user:pw@host:5432:G2/"
        }
    }

:meth:`EngineConfiguration.to_json` produces that document byte-for-byte
the way the client runtime encodes it: compact separators and html-safe
escaping of ``<``, ``>``, ``&``, U+2028 and U+2029.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Fields that are dropped from the wire form when they hold an empty string.
_OMIT_WHEN_EMPTY: dict[str, tuple[str, ...]] = {
    "PIPELINE": ("LICENSESTRINGBASE64",),
    "SQL": ("BACKEND",),
}

_HTML_SAFE_ESCAPES: dict[str, str] = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

# Value of ``SQL.BACKEND`` that denotes single-database mode.
SINGLE_DATABASE_BACKEND = "SQL"


def encode_html_safe(json_text: str) -> str:
    """Escape the characters the client runtime's encoder escapes.

    Only valid on text that is already JSON: ``<``, ``>`` and ``&`` can
    appear only inside string literals there, so the replacement never
    touches structure.
    """
    for char, escaped in _HTML_SAFE_ESCAPES.items():
        json_text = json_text.replace(char, escaped)
    return json_text


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


class PipelineSection(BaseModel):
    """File system locations the client runtime needs at startup."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    config_path: str = Field(default="", alias="CONFIGPATH")
    license_string_base64: str = Field(default="", alias="LICENSESTRINGBASE64")
    resource_path: str = Field(default="", alias="RESOURCEPATH")
    support_path: str = Field(default="", alias="SUPPORTPATH")


class SqlSection(BaseModel):
    """Database connection settings."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    backend: str = Field(
        default="",
        alias="BACKEND",
        description="Empty or 'SQL' for single-database mode; otherwise the top-level key of the backend map.",
    )
    connection: str = Field(default="", alias="CONNECTION")

    @property
    def is_multi_database(self) -> bool:
        """True when ``backend`` points at a map of named database entries."""
        return bool(self.backend) and self.backend != SINGLE_DATABASE_BACKEND


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class EngineConfiguration(BaseModel):
    """The ``PIPELINE`` and ``SQL`` sections of an engine configuration document.

    Additional top-level keys used in multi-database mode are not modelled
    here; :class:`engine_config.parser.ConfigurationParser` reads them from
    the raw document.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pipeline: PipelineSection = Field(default_factory=PipelineSection, alias="PIPELINE")
    sql: SqlSection = Field(default_factory=SqlSection, alias="SQL")

    def to_wire(self) -> dict[str, Any]:
        """Return the document as a plain dict keyed by wire names.

        Optional fields holding an empty string are omitted.
        """
        raw = self.model_dump(by_alias=True)
        for section, keys in _OMIT_WHEN_EMPTY.items():
            for key in keys:
                if raw[section].get(key) == "":
                    del raw[section][key]
        return raw

    def to_json(self) -> str:
        """Serialize to the compact wire form."""
        text = json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)
        return encode_html_safe(text)
