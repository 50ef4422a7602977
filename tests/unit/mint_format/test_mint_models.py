# -*- coding: utf-8 -*-
"""Location: ./tests/unit/mint_format/test_mint_models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for the option and result models.
"""

# Third-Party
from pydantic import ValidationError
import pytest

# First-Party
from mint_format.models import DecodeOptions, EncodeOptions, TokenEstimate, ValidationIssue, ValidationResult


class TestOptionModels:
    """Test EncodeOptions and DecodeOptions."""

    def test_defaults(self):
        """Defaults match the format's conventions."""
        enc = EncodeOptions()
        dec = DecodeOptions()
        assert (enc.indent, enc.compact, enc.sort_keys) == (2, False, False)
        assert (dec.strict, dec.indent) == (True, 2)

    def test_alias_and_field_name(self):
        """sort_keys accepts its camelCase alias as well."""
        assert EncodeOptions(sortKeys=True).sort_keys is True
        assert EncodeOptions(sort_keys=True).sort_keys is True

    def test_frozen(self):
        """Options are immutable."""
        opts = EncodeOptions()
        with pytest.raises(ValidationError):
            opts.indent = 4

    def test_rejects_bad_values(self):
        """Non-positive indents and unknown keys fail validation."""
        with pytest.raises(ValidationError):
            EncodeOptions(indent=0)
        with pytest.raises(ValidationError):
            DecodeOptions(indent=-2)
        with pytest.raises(ValidationError):
            DecodeOptions(lenient=True)

    def test_resolve(self):
        """resolve merges models, mappings and keyword overrides."""
        base = DecodeOptions(strict=False)
        assert DecodeOptions.resolve(base) is base
        merged = DecodeOptions.resolve(base, indent=4)
        assert (merged.strict, merged.indent) == (False, 4)
        assert DecodeOptions.resolve({"indent": 3}, strict=False) == DecodeOptions(indent=3, strict=False)
        assert DecodeOptions.resolve(None) == DecodeOptions()


class TestResultModels:
    """Test ValidationResult and TokenEstimate."""

    def test_validation_result(self):
        """Results carry structured issues."""
        issue = ValidationIssue(line=1, column=1, message="bad")
        result = ValidationResult(valid=False, errors=[issue])
        assert result.errors[0].context is None
        assert result.model_dump()["errors"][0]["message"] == "bad"

    def test_token_estimate_names(self):
        """Estimates accept field names or aliases."""
        by_name = TokenEstimate(json_tokens=10, mint_tokens=5, savings=5, savings_percent=50)
        by_alias = TokenEstimate(json=10, mint=5, savings=5, savingsPercent=50)
        assert by_name == by_alias
        assert by_alias.model_dump() == {"json_tokens": 10, "mint_tokens": 5, "savings": 5, "savings_percent": 50}
