# -*- coding: utf-8 -*-
"""Location: ./mint_format/tokens.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Token estimation for MINT and JSON renderings.

Uses a characters-per-token heuristic, not a real tokenizer. JSON text is
produced with orjson using two-space indentation so the comparison is against
pretty-printed JSON.

Examples:
    >>> count_tokens("abcdefg")
    2
    >>> compare_texts("x" * 70, "x" * 35).savings_percent
    50
"""

# Standard
import math
from typing import Any, Mapping, Union

# Third-Party
import orjson

# First-Party
from mint_format.constants import CHARS_PER_TOKEN
from mint_format.encoder import encode
from mint_format.models import EncodeOptions, TokenEstimate


def count_tokens(text: str) -> int:
    """Estimate the token count of a text.

    Args:
        text: Any text.

    Returns:
        ``ceil(len(text) / 3.5)``.

    Examples:
        >>> count_tokens("")
        0
        >>> count_tokens("abcd")
        2
    """
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def compare_texts(json_text: str, mint_text: str) -> TokenEstimate:
    """Compare the estimated token counts of a JSON text and a MINT text.

    Args:
        json_text: JSON rendering.
        mint_text: MINT rendering.

    Returns:
        Token estimate; ``savings_percent`` is rounded half up and is 0 when
        the JSON text is empty.

    Examples:
        >>> est = compare_texts("{}", "")
        >>> est.json_tokens, est.mint_tokens, est.savings, est.savings_percent
        (1, 0, 1, 100)
        >>> compare_texts("", "").savings_percent
        0
    """
    json_tokens = count_tokens(json_text)
    mint_tokens = count_tokens(mint_text)
    savings = json_tokens - mint_tokens
    savings_percent = math.floor(savings * 100 / json_tokens + 0.5) if json_tokens else 0
    return TokenEstimate(json_tokens=json_tokens, mint_tokens=mint_tokens, savings=savings, savings_percent=savings_percent)


def to_json_text(value: Any) -> str:
    """Render a value as two-space indented JSON.

    Args:
        value: JSON-compatible value.

    Returns:
        JSON text.

    Examples:
        >>> print(to_json_text({"a": [1, 2]}))
        {
          "a": [
            1,
            2
          ]
        }
    """
    return orjson.dumps(value, option=orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS).decode()


def estimate_tokens(value: Any, options: Union[EncodeOptions, Mapping[str, Any], None] = None) -> TokenEstimate:
    """Estimate the token savings of MINT over JSON for a value.

    Args:
        value: JSON-compatible value.
        options: Encoding options for the MINT rendering.

    Returns:
        Token estimate for both renderings.

    Examples:
        >>> data = {"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}
        >>> est = estimate_tokens(data)
        >>> est.mint_tokens < est.json_tokens
        True
        >>> est.savings_percent > 0
        True
    """
    return compare_texts(to_json_text(value), encode(value, options))
