"""Unit tests for engine_config.jsonutil."""

from __future__ import annotations

import pytest
from engine_config.errors import InvalidJSONError
from engine_config.jsonutil import normalize, normalize_and_sort

# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


class TestNormalize:
    def test_compact_and_sorted_keys(self):
        assert normalize('{ "b": 1,\n  "a": [2, 1] }') == '{"a":[2,1],"b":1}'

    def test_nested_keys_sorted(self):
        assert normalize('{"z": {"y": 1, "x": 2}}') == '{"z":{"x":2,"y":1}}'

    def test_whitespace_and_order_insensitive(self):
        assert normalize('{"a":1,"b":2}') == normalize('{ "b" : 2 , "a" : 1 }')

    def test_scalar(self):
        assert normalize(' "text" ') == '"text"'

    def test_html_characters_escaped(self):
        assert normalize('{"a": "<&>"}') == '{"a":"\\u003c\\u0026\\u003e"}'

    def test_invalid_raises(self):
        with pytest.raises(InvalidJSONError):
            normalize("{not json")

    def test_deeply_nested_raises(self):
        with pytest.raises(InvalidJSONError):
            normalize("[" * 200_000 + "]" * 200_000)


# ---------------------------------------------------------------------------
# normalize_and_sort
# ---------------------------------------------------------------------------


class TestNormalizeAndSort:
    def test_arrays_sorted(self):
        assert normalize_and_sort('{"b": 1, "a": ["c", "a", "b"]}') == '{"a":["a","b","c"],"b":1}'

    def test_arrays_of_objects_sorted(self):
        assert normalize_and_sort('[{"b": 1}, {"a": 2}]') == '[{"a":2},{"b":1}]'

    def test_nested_arrays_sorted(self):
        assert normalize_and_sort('{"x": [["b", "a"], ["a"]]}') == '{"x":[["a","b"],["a"]]}'

    def test_list_order_insensitive(self):
        assert normalize_and_sort('["x", "y"]') == normalize_and_sort('["y", "x"]')

    def test_invalid_raises(self):
        with pytest.raises(InvalidJSONError):
            normalize_and_sort("[1,")
