# -*- coding: utf-8 -*-
"""Location: ./mint_format/models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Pydantic models for the MINT codec.
This module implements the option models accepted by ``encode`` and ``decode``
and the result models returned by ``validate`` and ``estimate_tokens``.

Field names are snake_case; camelCase aliases keep the language-neutral names
(``sortKeys``, ``savingsPercent``, ...) usable on input and via
``model_dump(by_alias=True)``.

Examples:
    >>> EncodeOptions().indent
    2
    >>> EncodeOptions(sortKeys=True).sort_keys
    True
    >>> DecodeOptions.resolve({"strict": False}).strict
    False
"""

# Standard
from typing import Any, List, Mapping, Optional, Self, Union

# Third-Party
from pydantic import BaseModel, ConfigDict, Field

# First-Party
from mint_format.constants import DEFAULT_INDENT


class _OptionsModel(BaseModel):
    """Shared behaviour for option models."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    @classmethod
    def resolve(cls, options: Union[Self, Mapping[str, Any], None] = None, **overrides: Any) -> Self:
        """Build an options instance from a model, a mapping and keyword overrides.

        Args:
            options: An existing instance, a mapping of field names or aliases, or None.
            **overrides: Field values that take precedence over ``options``.

        Returns:
            A validated, immutable options instance.

        Raises:
            ValidationError: If a value fails validation or a key is unknown.

        Examples:
            >>> EncodeOptions.resolve(None, indent=4).indent
            4
            >>> base = EncodeOptions(compact=True)
            >>> EncodeOptions.resolve(base) is base
            True
            >>> EncodeOptions.resolve(base, sort_keys=True).compact
            True
        """
        if isinstance(options, cls) and not overrides:
            return options
        if isinstance(options, cls):
            data = options.model_dump()
        else:
            data = dict(options or {})
        data.update(overrides)
        return cls.model_validate(data)


class EncodeOptions(_OptionsModel):
    """Options for MINT encoding.

    Attributes:
        indent: Spaces per indentation level.
        compact: Replace common status words with single-character symbols.
        sort_keys: Emit object keys in sorted order instead of insertion order.
    """

    indent: int = Field(default=DEFAULT_INDENT, ge=1, description="Spaces per indentation level")
    compact: bool = Field(default=False, description="Enable compact mode with status symbols")
    sort_keys: bool = Field(default=False, alias="sortKeys", description="Sort object keys alphabetically")


class DecodeOptions(_OptionsModel):
    """Options for MINT decoding.

    Attributes:
        strict: Report dropped or malformed constructs at WARNING level instead of DEBUG.
        indent: Expected indentation unit, used for strict-mode diagnostics.
    """

    strict: bool = Field(default=True, description="Report skipped constructs as warnings")
    indent: int = Field(default=DEFAULT_INDENT, ge=1, description="Expected indentation spaces")


class ValidationIssue(BaseModel):
    """A single problem found by the validator.

    Examples:
        >>> issue = ValidationIssue(line=2, column=1, message="bad", context="   x")
        >>> issue.model_dump()
        {'line': 2, 'column': 1, 'message': 'bad', 'context': '   x'}
    """

    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    message: str
    context: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of ``validate``.

    Examples:
        >>> ValidationResult(valid=True).errors
        []
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: List[ValidationIssue] = Field(default_factory=list)


class TokenEstimate(BaseModel):
    """Estimated token counts for the JSON and MINT renderings of a value.

    Examples:
        >>> est = TokenEstimate(json=10, mint=6, savings=4, savingsPercent=40)
        >>> est.json_tokens, est.mint_tokens
        (10, 6)
        >>> est.model_dump(by_alias=True)
        {'json': 10, 'mint': 6, 'savings': 4, 'savingsPercent': 40}
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    json_tokens: int = Field(alias="json")
    mint_tokens: int = Field(alias="mint")
    savings: int
    savings_percent: int = Field(alias="savingsPercent")
