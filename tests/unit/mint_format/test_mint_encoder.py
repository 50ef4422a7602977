# -*- coding: utf-8 -*-
"""Location: ./tests/unit/mint_format/test_mint_encoder.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for the MINT encoder.
"""

# Third-Party
from pydantic import ValidationError
import pytest

# First-Party
from mint_format.encoder import encode, encode_key
from mint_format.models import EncodeOptions


class TestEncodeRoot:
    """Test root-level dispatch."""

    def test_null(self):
        """None encodes to 'null'."""
        assert encode(None) == "null"

    def test_primitives(self):
        """Scalars encode on their own."""
        assert encode(42) == "42"
        assert encode(True) == "true"
        assert encode("hello") == "hello"
        assert encode("123") == '"123"'

    def test_empty_object(self):
        """An empty root object is an empty document."""
        assert encode({}) == ""

    def test_root_arrays(self):
        """Root arrays use the '_' key."""
        assert encode([]) == "_: []"
        assert encode([1, 2, 3]) == "_: 1, 2, 3"
        assert encode(("a", None)) == "_: a, null"

    def test_root_table(self):
        """A root array of uniform objects is a table under '_'."""
        assert encode([{"b": 1, "a": 2}, {"a": 3, "b": 4}]) == "_:\n  | b | a |\n  | 1 | 2 |\n  | 4 | 3 |"

    def test_root_mixed(self):
        """A root mixed array is a dash list under '_'."""
        assert encode([1, {"a": 1, "b": 2}]) == "_:\n  - 1\n  -\n    a: 1\n    b: 2"


class TestEncodeObjects:
    """Test object encoding."""

    def test_simple_object(self):
        """Scalar fields become key-value lines."""
        assert encode({"name": "Alice"}) == "name: Alice"
        assert encode({"name": "Alice", "age": 30, "active": True, "score": None}) == "name: Alice\nage: 30\nactive: true\nscore: null"

    def test_quoted_value(self):
        """Values with separators are quoted."""
        assert encode({"msg": "Hello, World!"}) == 'msg: "Hello, World!"'

    def test_nested_objects(self):
        """Nested objects indent one level per depth."""
        assert encode({"user": {"name": "Alice", "age": 30}}) == "user:\n  name: Alice\n  age: 30"
        assert encode({"a": {"b": {"c": 1}}}) == "a:\n  b:\n    c: 1"

    def test_single_key_child_stays_nested(self):
        """A one-key child object is still written as a block."""
        assert encode({"user": {"name": "Alice"}}) == "user:\n  name: Alice"

    def test_empty_nested_object(self):
        """An empty child object is a bare key."""
        assert encode({"metadata": {}}) == "metadata:"

    def test_url_is_bare(self):
        """URLs are not quoted."""
        assert encode({"url": "https://example.com/path"}) == "url: https://example.com/path"

    def test_non_string_keys(self):
        """Non-string keys are stringified."""
        assert encode({1: "a", 2.5: "b"}) == "1: a\n2.5: b"

    def test_unserializable_value(self):
        """Values outside the JSON model raise TypeError."""
        with pytest.raises(TypeError, match="set is not MINT serializable"):
            encode({"a": {1, 2}})
        with pytest.raises(TypeError):
            encode({"a": [1, {"b": object()}]})


class TestEncodeKeys:
    """Test key quoting."""

    def test_plain_keys(self):
        """Ordinary keys, spaces included, stay bare."""
        assert encode_key("name") == "name"
        assert encode_key("first name") == "first name"
        assert encode_key("__init__") == "__init__"

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("with:colon", '"with:colon"'),
            ("_", '"_"'),
            ("-x", '"-x"'),
            ("#c", '"#c"'),
            ("", '""'),
            (" pad", '" pad"'),
            ('q"k', '"q\\"k"'),
            ("a|b", '"a|b"'),
        ],
    )
    def test_quoted_keys(self, key, expected):
        """Keys the decoder would misread are quoted."""
        assert encode_key(key) == expected


class TestEncodeArrays:
    """Test array fields."""

    def test_inline_primitives(self):
        """Primitive arrays are written inline."""
        assert encode({"tags": ["a", "b", "c"]}) == "tags: a, b, c"
        assert encode({"nums": (1, 2.5, None, False)}) == "nums: 1, 2.5, null, false"

    def test_inline_quoted_elements(self):
        """Elements containing separators are quoted."""
        assert encode({"parts": ["a, b", "c"]}) == 'parts: "a, b", c'

    def test_empty_array(self):
        """Empty arrays are '[]'."""
        assert encode({"items": []}) == "items: []"

    def test_table(self, users):
        """Uniform objects become an aligned table."""
        assert encode(users) == "users:\n  | id | name  |\n  | 1  | Alice |\n  | 2  | Bob   |"

    def test_table_nulls(self):
        """None and empty strings are '-' in table cells."""
        result = encode({"items": [{"id": 1, "v": None}, {"id": 2, "v": ""}, {"id": 3, "v": "x"}]})
        assert result == "items:\n  | id | v |\n  | 1  | - |\n  | 2  | - |\n  | 3  | x |"

    def test_table_columns_align(self):
        """Every table line has the same width and pipe count."""
        result = encode({"rows": [{"short": 1, "a_much_longer_header": "x"}, {"short": 12345678, "a_much_longer_header": "value"}]})
        lines = result.split("\n")[1:]
        assert len({len(line) for line in lines}) == 1
        assert len({line.count("|") for line in lines}) == 1

    def test_table_quoted_cell(self):
        """Cells with pipes are quoted and widths count the quotes."""
        assert encode({"t": [{"a": "x|y"}]}) == 't:\n  | a     |\n  | "x|y" |'

    def test_mixed_array(self):
        """Mixed arrays become dash lists."""
        result = encode({"items": [1, {"a": 1}, [2, 3], [], {}]})
        assert result == "items:\n  - 1\n  - a: 1\n  - 2, 3\n  - []\n  -"

    def test_mixed_multi_key_object(self):
        """Multi-line items put the block under a bare dash."""
        assert encode({"items": [{"a": 1, "b": 2}, "x"]}) == "items:\n  -\n    a: 1\n    b: 2\n  - x"

    def test_table_inside_mixed_array(self):
        """A table item is nested under its dash."""
        assert encode({"items": [[{"k": 1}], 2]}) == "items:\n  -\n    | k |\n    | 1 |\n  - 2"

    def test_list_inside_mixed_array(self):
        """A mixed item list nests one level deeper."""
        assert encode({"x": [[1, {"a": 1}], 2]}) == "x:\n  -\n    - 1\n    - a: 1\n  - 2"

    def test_single_item_dash_list_inside_mixed_array(self):
        """A one-item dash list still starts under a bare dash."""
        assert encode({"k": [[[1, 2]], 3]}) == "k:\n  -\n    - 1, 2\n  - 3"
        assert encode([[{" ": 1}], {}]) == '_:\n  -\n    - " ": 1\n  -'

    def test_objects_with_differing_keys(self):
        """Objects with different key sets are not a table."""
        assert encode({"rows": [{"a": 1}, {"b": 2}]}) == "rows:\n  - a: 1\n  - b: 2"


class TestEncodeOptions:
    """Test encoding options."""

    def test_custom_indent(self):
        """Indent sets spaces per level."""
        assert encode({"user": {"name": "Alice"}}, indent=4) == "user:\n    name: Alice"
        assert encode({"u": [{"x": 1}]}, indent=4) == "u:\n    | x |\n    | 1 |"

    def test_sort_keys(self):
        """Keys are sorted at every level."""
        result = encode({"zebra": 1, "apple": 2, "mango": {"z": 1, "a": 2}}, sort_keys=True)
        assert result.split("\n") == ["apple: 2", "mango:", "  a: 2", "  z: 1", "zebra: 1"]

    def test_options_mapping_with_alias(self):
        """Options may be a mapping using camelCase names."""
        assert encode({"b": 1, "a": 2}, {"sortKeys": True}) == "a: 2\nb: 1"

    def test_options_model(self):
        """Options may be a model, with keyword overrides winning."""
        opts = EncodeOptions(indent=4)
        assert encode({"u": {"n": 1}}, opts) == "u:\n    n: 1"
        assert encode({"u": {"n": 1}}, opts, indent=1) == "u:\n n: 1"

    def test_compact_mode(self):
        """Compact mode writes status symbols."""
        data = {"items": [{"id": 1, "status": "completed"}, {"id": 2, "status": "pending"}, {"id": 3, "status": "failed"}]}
        result = encode(data, compact=True)
        assert "✓" in result
        assert "⏳" in result
        assert "✗" in result

    def test_invalid_options(self):
        """Unknown or invalid options are rejected."""
        with pytest.raises(ValidationError):
            encode({}, indent=0)
        with pytest.raises(ValidationError):
            encode({}, colour=True)
