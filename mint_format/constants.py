# -*- coding: utf-8 -*-
"""Location: ./mint_format/constants.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

MINT format constants.
This module stores the syntax markers, numeric heuristics and the read-only
status symbol tables shared by the encoder, decoder and validator.
"""

# Standard
from types import MappingProxyType

# Syntax markers.
TABLE_MARKER = "|"
COMMENT_PREFIX = "#"
LIST_ITEM_MARKER = "-"
NULL_CELL = "-"
ROOT_ARRAY_KEY = "_"
EMPTY_ARRAY = "[]"
KEY_SEPARATOR = ":"
URL_SCHEME_SEPARATOR = "://"

# Inline list separators.
INLINE_SEPARATOR = ", "
INLINE_PIPE_SEPARATOR = " | "

# Defaults.
DEFAULT_INDENT = 2

# Token estimation: characters per token.
CHARS_PER_TOKEN = 3.5

# Compact mode: status word -> symbol (lookup is case-insensitive).
STATUS_SYMBOLS = MappingProxyType(
    {
        "completed": "✓",
        "complete": "✓",
        "success": "✓",
        "done": "✓",
        "passed": "✓",
        "true": "✓",
        "yes": "✓",
        "failed": "✗",
        "failure": "✗",
        "error": "✗",
        "rejected": "✗",
        "false": "✗",
        "no": "✗",
        "pending": "⏳",
        "waiting": "⏳",
        "in_progress": "⏳",
        "running": "⏳",
        "warning": "⚠",
        "warn": "⚠",
        "review": "?",
        "unknown": "?",
    }
)

# Decode side: symbol -> canonical word. Lossy, several words share a symbol.
REVERSE_SYMBOLS = MappingProxyType(
    {
        "✓": "true",
        "✗": "false",
        "⏳": "pending",
        "⚠": "warning",
        "?": "unknown",
    }
)
