# -*- coding: utf-8 -*-
"""Location: ./tests/unit/mint_format/test_mint_validator.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for MINT syntax validation.
"""

# Third-Party
import pytest

# First-Party
from mint_format.encoder import encode
from mint_format.validator import count_pipes, validate


class TestValidate:
    """Test the validator."""

    def test_valid_document(self):
        """A well-formed document has no errors."""
        text = "name: Alice\nusers:\n  | id | name  |\n  | 1  | Alice |\n  | 2  | Bob   |"
        result = validate(text)
        assert result.valid is True
        assert result.errors == []

    def test_encoder_output_is_valid(self, workflow):
        """Encoder output always validates."""
        assert validate(encode(workflow)).valid
        assert validate(encode(workflow, indent=4), indent=4).valid

    def test_inconsistent_indentation(self):
        """Odd indentation is reported at column 1 with the raw line."""
        result = validate("user:\n   name: Alice")
        assert result.valid is False
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.line == 2
        assert error.column == 1
        assert error.message == "Inconsistent indentation: 3 spaces (should be multiple of 2)"
        assert error.context == "   name: Alice"

    def test_custom_indent_unit(self):
        """The indentation unit is configurable."""
        assert validate("a:\n  b: 1", indent=4).errors[0].message == "Inconsistent indentation: 2 spaces (should be multiple of 4)"
        assert validate("a:\n    b: 1", indent=4).valid

    @pytest.mark.parametrize("indent", [0, -2])
    def test_non_positive_indent_uses_default(self, indent):
        """Indent units below 1 fall back to 2 instead of failing."""
        assert validate("a:\n  b: 1", indent=indent).valid
        assert validate("a:\n   b: 1", indent=indent).errors[0].message == "Inconsistent indentation: 3 spaces (should be multiple of 2)"

    def test_table_column_mismatch(self):
        """A row with fewer columns than the header is reported."""
        result = validate("items:\n  | id | name | value |\n  | 1  | test |")
        assert result.valid is False
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.line == 3
        assert error.column == 1
        assert error.message == "Table column mismatch: expected 3 columns, got 2"

    def test_missing_row_terminator(self):
        """A row not ending with a pipe is reported at its last column."""
        result = validate("| a |\n| 1")
        messages = [(e.line, e.column, e.message) for e in result.errors]
        assert (2, 3, "Table row must end with |") in messages

    def test_quoted_pipes_do_not_count(self):
        """Pipes inside quoted cells are not column separators."""
        assert validate('| a | b |\n| "x|y" | 2 |').valid

    def test_new_table_resets_column_count(self):
        """A non-table line starts a fresh table."""
        text = "a:\n  | x |\n  | 1 |\nb:\n  | x | y |\n  | 1 | 2 |"
        assert validate(text).valid

    def test_blank_and_comment_lines_skipped(self):
        """Blank lines and comments are never errors."""
        assert validate("# header\n\n   # odd comment\nname: x\r\n").valid

    def test_errors_accumulate(self):
        """Every problem is reported, never raised."""
        result = validate(" a: 1\n   b: 2\n| x | y |\n| 1 |")
        assert [e.line for e in result.errors] == [1, 2, 4]

    def test_count_pipes(self):
        """Structural pipes include the outer ones."""
        assert count_pipes("| a | b | c |") == 4
        assert count_pipes('| "a|b" |') == 2
