# -*- coding: utf-8 -*-
"""Location: ./mint_format/primitives.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Scalar formatting, quoting and parsing for MINT.

Strings are emitted bare unless they could be misread on decode: empty
strings, surrounding whitespace, separators (``,`` ``|`` line breaks),
number-like or reserved words, colons outside ``://`` and double quotes all
force quoting. Quoted strings use the escapes ``\\\\ \\" \\n \\r \\t``.

Examples:
    >>> from mint_format.models import EncodeOptions
    >>> opts = EncodeOptions()
    >>> format_primitive("Alice", opts)
    'Alice'
    >>> format_primitive("Hello, World!", opts)
    '"Hello, World!"'
    >>> format_primitive(None, opts, in_table=True)
    '-'
    >>> parse_primitive('"Hello, World!"')
    'Hello, World!'
    >>> parse_primitive("42")
    42
"""

from __future__ import annotations

# Standard
import math
import re
from typing import Any, List, Optional

# First-Party
from mint_format.constants import EMPTY_ARRAY, NULL_CELL, REVERSE_SYMBOLS, STATUS_SYMBOLS
from mint_format.models import EncodeOptions

# Reserved words that must be quoted if used as string values
_RESERVED_WORDS = frozenset({"null", "true", "false"})

# Plain decimal shape, e.g. "42", "-3.", "19.99"
_PLAIN_DECIMAL_RE = re.compile(r"^-?\d+\.?\d*$")

# Numeric literal accepted by the decoder
_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?([eE][+-]?\d+)?$")

# A colon that is not the start of "://"
_BARE_COLON_RE = re.compile(r":(?!//)")

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", '"': '"', "\\": "\\"}

# Largest magnitude printed without an exponent for integral floats
_MAX_PLAIN_FLOAT = 1e21

# Integers outside the signed 64-bit range decode as floats
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = 19


def is_primitive(value: Any) -> bool:
    """Check if value is a scalar (not a dict or list).

    Args:
        value: Value to check.

    Returns:
        True for None, bool, int, float and str.

    Examples:
        >>> is_primitive(None), is_primitive("x"), is_primitive(1.5)
        (True, True, True)
        >>> is_primitive([]), is_primitive({})
        (False, False)
    """
    return value is None or isinstance(value, (bool, int, float, str))


def needs_quoting(value: str) -> bool:
    """Determine if a string value needs to be quoted.

    Args:
        value: String to check.

    Returns:
        True if the string must be wrapped in double quotes.

    Examples:
        >>> needs_quoting("hello world")
        False
        >>> needs_quoting("")
        True
        >>> needs_quoting("a|b")
        True
        >>> needs_quoting("42")
        True
        >>> needs_quoting("True")
        True
        >>> needs_quoting("https://example.com/path")
        False
        >>> needs_quoting("key: value")
        True
    """
    if not value:
        return True
    if value[0].isspace() or value[-1].isspace():
        return True
    if "|" in value or "\n" in value or "\r" in value:
        return True
    if "," in value:
        return True
    if _PLAIN_DECIMAL_RE.match(value) or _NUMBER_RE.match(value):
        return True
    if value.lower() in _RESERVED_WORDS:
        return True
    if _BARE_COLON_RE.search(value):
        return True
    if '"' in value:
        return True
    # Would decode as null, an empty array or a status symbol
    if value in (NULL_CELL, EMPTY_ARRAY) or value in REVERSE_SYMBOLS:
        return True
    return False


def escape_string(value: str) -> str:
    r"""Escape a string for use inside double quotes.

    Backslashes are escaped first so later substitutions are not doubled.

    Args:
        value: Raw string.

    Returns:
        Escaped string without surrounding quotes.

    Examples:
        >>> escape_string('say "hi"')
        'say \\"hi\\"'
        >>> escape_string("a\nb")
        'a\\nb'
    """
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")


def unescape_string(value: str) -> str:
    r"""Reverse ``escape_string`` in a single left-to-right scan.

    Unknown escape sequences are kept verbatim.

    Args:
        value: Escaped text without surrounding quotes.

    Returns:
        The unescaped string.

    Examples:
        >>> unescape_string('say \\"hi\\"')
        'say "hi"'
        >>> unescape_string("a\\nb") == "a\nb"
        True
        >>> unescape_string("c:\\\\new") == "c:\\new"
        True
    """
    if "\\" not in value:
        return value
    result = []
    i = 0
    while i < len(value):
        char = value[i]
        if char == "\\" and i + 1 < len(value):
            replacement = _ESCAPES.get(value[i + 1])
            if replacement is not None:
                result.append(replacement)
                i += 2
                continue
        result.append(char)
        i += 1
    return "".join(result)


def quote_string(value: str) -> str:
    """Quote and escape a string unconditionally.

    Args:
        value: String to quote.

    Returns:
        Quoted string with escapes applied.

    Examples:
        >>> quote_string("a,b")
        '"a,b"'
    """
    return f'"{escape_string(value)}"'


def format_number(value: float) -> str:
    """Format an int or float as decimal text.

    Args:
        value: Number to format.

    Returns:
        Decimal text, or ``null`` for NaN and infinities.

    Examples:
        >>> format_number(42)
        '42'
        >>> format_number(19.99)
        '19.99'
        >>> format_number(1.0)
        '1'
        >>> format_number(float("inf"))
        'null'
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return "null"
    if value.is_integer() and abs(value) < _MAX_PLAIN_FLOAT:
        return str(int(value))
    return repr(value)


def format_primitive(value: Any, options: EncodeOptions, in_table: bool = False) -> str:
    """Format a scalar value.

    Args:
        value: None, bool, int, float or str.
        options: Resolved encoding options.
        in_table: Whether the value is a table cell.

    Returns:
        MINT text for the value.

    Raises:
        TypeError: If value is not a JSON scalar.

    Examples:
        >>> opts = EncodeOptions(compact=True)
        >>> format_primitive("Completed", opts)
        '✓'
        >>> format_primitive("", opts, in_table=True)
        '-'
        >>> format_primitive("", opts)
        '""'
        >>> format_primitive(False, opts)
        'false'
    """
    if value is None:
        return NULL_CELL if in_table else "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        if options.compact:
            symbol = STATUS_SYMBOLS.get(value.lower())
            if symbol is not None:
                return symbol
        if value == "" and in_table:
            return NULL_CELL
        if needs_quoting(value):
            return quote_string(value)
        return value
    raise TypeError(f"Object of type {type(value).__name__} is not MINT serializable")


def _parse_number(text: str) -> Optional[float]:
    """Convert numeric text to int or float, or None if not finite.

    Integral text outside the signed 64-bit range becomes a float.

    Args:
        text: Text already matched against the numeric pattern.

    Returns:
        The number, or None.

    Examples:
        >>> _parse_number("9223372036854775807")
        9223372036854775807
        >>> _parse_number("99999999999999999999")
        1e+20
    """
    if "." not in text and "e" not in text and "E" not in text and len(text.lstrip("-")) <= _INT64_MAX_DIGITS:
        number = int(text)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    number = float(text)
    return number if math.isfinite(number) else None


def parse_primitive(text: str) -> Any:
    """Parse a scalar value.

    Args:
        text: Raw value text (surrounding whitespace is ignored).

    Returns:
        The decoded scalar.

    Examples:
        >>> parse_primitive("-") is None
        True
        >>> parse_primitive(" true ")
        True
        >>> parse_primitive("⏳")
        'pending'
        >>> parse_primitive("1e3")
        1000.0
        >>> parse_primitive("1e999")
        '1e999'
        >>> parse_primitive("v1.2")
        'v1.2'
    """
    trimmed = text.strip()
    if trimmed in ("null", NULL_CELL, ""):
        return None
    if trimmed == "true":
        return True
    if trimmed == "false":
        return False
    if trimmed in REVERSE_SYMBOLS:
        return REVERSE_SYMBOLS[trimmed]
    if len(trimmed) >= 2 and trimmed.startswith('"') and trimmed.endswith('"'):
        return unescape_string(trimmed[1:-1])
    if _NUMBER_RE.match(trimmed):
        number = _parse_number(trimmed)
        if number is not None:
            return number
    return trimmed


def quoted_token_end(text: str, start: int = 0) -> int:
    """Find the index of the closing quote of a quoted token.

    Args:
        text: Text containing a quoted token.
        start: Index of the opening quote.

    Returns:
        Index of the closing quote, or -1 if unterminated.

    Examples:
        >>> quoted_token_end('"a\\\\"b" rest')
        5
        >>> quoted_token_end('"open')
        -1
    """
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == '"':
            return i
        i += 1
    return -1


def is_single_quoted(text: str) -> bool:
    """Check if text is exactly one quoted token.

    Args:
        text: Trimmed value text.

    Returns:
        True if text opens with a quote whose closing quote is the last character.

    Examples:
        >>> is_single_quoted('"Hello, World!"')
        True
        >>> is_single_quoted('"1", "2"')
        False
    """
    return text.startswith('"') and quoted_token_end(text) == len(text) - 1


def split_quoted(text: str, separator: str) -> List[str]:
    """Split text on a separator, ignoring separators inside quoted segments.

    Args:
        text: Text to split.
        separator: Separator string.

    Returns:
        Fragments in order (separators removed, fragments not trimmed).

    Examples:
        >>> split_quoted('"a, b", c', ", ")
        ['"a, b"', 'c']
        >>> split_quoted('| 1 | "x|y" |', "|")
        ['', ' 1 ', ' "x|y" ', '']
    """
    fragments = []
    current = []
    in_quotes = False
    i = 0
    while i < len(text):
        char = text[i]
        if in_quotes and char == "\\" and i + 1 < len(text):
            current.append(text[i : i + 2])
            i += 2
            continue
        if char == '"':
            in_quotes = not in_quotes
        elif not in_quotes and text.startswith(separator, i):
            fragments.append("".join(current))
            current = []
            i += len(separator)
            continue
        current.append(char)
        i += 1
    fragments.append("".join(current))
    return fragments
