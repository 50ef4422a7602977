# -*- coding: utf-8 -*-
"""Location: ./mint_format/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

MINT Format - Minimal Inference Notation for Tokens.
A human-readable, token-efficient alternative to JSON for LLM prompts:
indentation for structure, aligned pipe tables for uniform object arrays and
no braces or redundant quotes.

Examples:
    >>> from mint_format import decode, encode
    >>> encode({"name": "Alice", "tags": ["a", "b"]})
    'name: Alice\\ntags: a, b'
    >>> decode("name: Alice\\ntags: a, b")
    {'name': 'Alice', 'tags': ['a', 'b']}
"""

__author__ = "MINT Format Contributors"
__copyright__ = "Copyright 2025"
__license__ = "Apache 2.0"
__version__ = "1.0.0"

# First-Party
from mint_format.decoder import decode
from mint_format.encoder import encode
from mint_format.models import DecodeOptions, EncodeOptions, TokenEstimate, ValidationIssue, ValidationResult
from mint_format.tokens import compare_texts, count_tokens, estimate_tokens
from mint_format.validator import validate

__all__ = [
    "DecodeOptions",
    "EncodeOptions",
    "TokenEstimate",
    "ValidationIssue",
    "ValidationResult",
    "compare_texts",
    "count_tokens",
    "decode",
    "encode",
    "estimate_tokens",
    "validate",
]
