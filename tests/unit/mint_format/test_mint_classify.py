# -*- coding: utf-8 -*-
"""Location: ./tests/unit/mint_format/test_mint_classify.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for array classification.
"""

# Third-Party
import pytest

# First-Party
from mint_format.classify import ArrayKind, classify_array, is_table_array, is_table_safe_key


class TestClassifyArray:
    """Test the four array shapes."""

    def test_empty(self):
        """Empty lists and tuples are EMPTY."""
        assert classify_array([]) is ArrayKind.EMPTY
        assert classify_array(()) is ArrayKind.EMPTY

    def test_primitive(self):
        """Arrays of scalars, nulls included, are PRIMITIVE."""
        assert classify_array([1, "a", None, True, 2.5]) is ArrayKind.PRIMITIVE

    def test_table(self):
        """Uniform flat dicts are TABLE."""
        assert classify_array([{"id": 1, "name": "a"}, {"name": "b", "id": 2}]) is ArrayKind.TABLE

    @pytest.mark.parametrize(
        "arr",
        [
            [{"a": 1}, {"b": 2}],
            [{"a": 1}, {"a": 1, "b": 2}],
            [{"a": [1]}],
            [{"a": {"b": 1}}],
            [{"a": 1}, 2],
            [[1, 2], [3]],
            [{}, {}],
            [{"a|b": 1}],
        ],
    )
    def test_mixed(self, arr):
        """Anything else is MIXED."""
        assert classify_array(arr) is ArrayKind.MIXED

    def test_kind_is_a_string(self):
        """Kinds compare equal to their string values."""
        assert ArrayKind.TABLE == "table"


class TestTableEligibility:
    """Test the table predicates directly."""

    def test_safe_keys(self):
        """Keys that survive header splitting are safe."""
        assert is_table_safe_key("name")
        assert is_table_safe_key("first name")
        assert is_table_safe_key(1)

    @pytest.mark.parametrize("key", ["", " x", "x ", "a|b", "a\nb", 'q"k'])
    def test_unsafe_keys(self, key):
        """Empty, padded, piped, quoted or multi-line keys are unsafe."""
        assert not is_table_safe_key(key)

    def test_non_dict_elements(self):
        """A table needs dicts only."""
        assert not is_table_array([{"a": 1}, "x"])
        assert not is_table_array([])
