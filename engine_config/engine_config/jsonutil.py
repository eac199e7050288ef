"""Canonical JSON text for comparing documents.

``normalize`` re-emits a document compactly with object keys sorted, so two
documents that differ only in whitespace or key order normalise to the same
text.  ``normalize_and_sort`` additionally sorts array elements, for
comparisons where list order is not significant.
"""

from __future__ import annotations

import json
from typing import Any

from engine_config.errors import InvalidJSONError
from engine_config.models import encode_html_safe
from engine_config.parser import loads


def _dumps(value: Any) -> str:
    return encode_html_safe(json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False))


def _parse(json_text: str) -> Any:
    try:
        return loads(json_text)
    except (ValueError, RecursionError) as exc:
        raise InvalidJSONError(json_text, str(exc)) from exc


def _sort_arrays(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _sort_arrays(item) for key, item in value.items()}
    if isinstance(value, list):
        return sorted((_sort_arrays(item) for item in value), key=_dumps)
    return value


def normalize(json_text: str) -> str:
    """Return *json_text* compact with object keys sorted.

    Raises
    ------
    InvalidJSONError
        If *json_text* is not valid JSON.
    """
    return _dumps(_parse(json_text))


def normalize_and_sort(json_text: str) -> str:
    """Like :func:`normalize`, with every array sorted by its elements' normalised text."""
    return _dumps(_sort_arrays(_parse(json_text)))
