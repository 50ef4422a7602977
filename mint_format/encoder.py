# -*- coding: utf-8 -*-
"""Location: ./mint_format/encoder.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

MINT Encoder.

Walks a JSON-compatible value top-down and emits indented MINT text.

Token Reduction Strategies:
1. Keys and simple string values are written without quotation marks
2. Primitive arrays are written inline: ``tags: a, b, c``
3. Arrays of uniform flat objects become aligned pipe tables
4. Everything else nests by indentation, with ``-`` items for mixed arrays

Examples:
    >>> print(encode({"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}))
    users:
      | id | name  |
      | 1  | Alice |
      | 2  | Bob   |
    >>> encode([1, 2, 3])
    '_: 1, 2, 3'
    >>> encode({"metadata": {}})
    'metadata:'
"""

# Standard
from typing import Any, Dict, List, Mapping, Sequence, Union

# First-Party
from mint_format.classify import ArrayKind, classify_array
from mint_format.constants import COMMENT_PREFIX, EMPTY_ARRAY, INLINE_SEPARATOR, LIST_ITEM_MARKER, ROOT_ARRAY_KEY
from mint_format.models import EncodeOptions
from mint_format.primitives import format_primitive, is_primitive, quote_string

# Characters that force a key to be quoted
_KEY_SPECIAL_CHARS = frozenset(':"|\n\r')


def encode(value: Any, options: Union[EncodeOptions, Mapping[str, Any], None] = None, **overrides: Any) -> str:
    """Encode a Python value to MINT format.

    Args:
        value: Value to encode (dict, list, tuple, str, int, float, bool, None).
        options: Encoding options as a model or mapping.
        **overrides: Option fields that take precedence over ``options``.

    Returns:
        MINT-formatted string.

    Raises:
        TypeError: If the value contains a type outside the JSON data model.

    Examples:
        >>> encode(None)
        'null'
        >>> encode(42)
        '42'
        >>> encode({"name": "Alice"})
        'name: Alice'
        >>> encode({"msg": "Hello, World!"})
        'msg: "Hello, World!"'
        >>> encode({"items": []})
        'items: []'
        >>> encode([])
        '_: []'
        >>> encode({"zebra": 1, "apple": 2}, sort_keys=True)
        'apple: 2\\nzebra: 1'
        >>> encode({"user": {"name": "Alice"}}, indent=4)
        'user:\\n    name: Alice'
    """
    opts = EncodeOptions.resolve(options, **overrides)

    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return _encode_root_array(list(value), opts)
    if isinstance(value, dict):
        return _encode_object(value, opts, 0)
    return format_primitive(value, opts)


def encode_key(key: Any) -> str:
    """Encode an object key, quoting it only when the decoder would misread it.

    Args:
        key: Object key (non-string keys are converted with ``str``).

    Returns:
        MINT key representation.

    Examples:
        >>> encode_key("simple")
        'simple'
        >>> encode_key("has space")
        'has space'
        >>> encode_key("with:colon")
        '"with:colon"'
        >>> encode_key("_")
        '"_"'
        >>> encode_key(7)
        '7'
    """
    text = key if isinstance(key, str) else str(key)
    if not text or text != text.strip():
        return quote_string(text)
    if any(char in _KEY_SPECIAL_CHARS for char in text):
        return quote_string(text)
    if text[0] in (COMMENT_PREFIX, LIST_ITEM_MARKER) or text == ROOT_ARRAY_KEY:
        return quote_string(text)
    return text


def _indent(options: EncodeOptions, level: int) -> str:
    """Return the whitespace prefix for an indentation level.

    Args:
        options: Resolved encoding options.
        level: Indentation level.

    Returns:
        Leading spaces.
    """
    return " " * (options.indent * level)


def _encode_inline(arr: Sequence[Any], options: EncodeOptions) -> str:
    """Join primitive values into an inline list.

    Args:
        arr: Array of primitives.
        options: Resolved encoding options.

    Returns:
        Comma-separated values.
    """
    return INLINE_SEPARATOR.join(format_primitive(item, options) for item in arr)


def _encode_root_array(arr: List[Any], options: EncodeOptions) -> str:
    """Encode an array that is the document root under the ``_`` key.

    Args:
        arr: Root array.
        options: Resolved encoding options.

    Returns:
        MINT document text.

    Examples:
        >>> print(_encode_root_array([{"x": 1}, {"x": 22}], EncodeOptions()))
        _:
          | x  |
          | 1  |
          | 22 |
        >>> print(_encode_root_array([1, [2, 3]], EncodeOptions()))
        _:
          - 1
          - 2, 3
    """
    kind = classify_array(arr)
    if kind is ArrayKind.EMPTY:
        return f"{ROOT_ARRAY_KEY}: {EMPTY_ARRAY}"
    if kind is ArrayKind.PRIMITIVE:
        return f"{ROOT_ARRAY_KEY}: {_encode_inline(arr, options)}"
    if kind is ArrayKind.TABLE:
        return f"{ROOT_ARRAY_KEY}:\n{_encode_table(arr, options, 1)}"
    return f"{ROOT_ARRAY_KEY}:\n{_encode_list_items(arr, options, 0)}"


def _encode_table(arr: Sequence[Dict[str, Any]], options: EncodeOptions, level: int) -> str:
    """Encode uniform flat objects as an aligned pipe table.

    Column order follows the first object's key order. Each column is as wide
    as its widest header or cell.

    Args:
        arr: Table-eligible array.
        options: Resolved encoding options.
        level: Indentation level of the header row.

    Returns:
        Header row followed by one row per object.

    Examples:
        >>> print(_encode_table([{"id": 1, "v": None}, {"id": 10, "v": ""}], EncodeOptions(), 0))
        | id | v |
        | 1  | - |
        | 10 | - |
    """
    headers = list(arr[0].keys())
    labels = [str(header) for header in headers]
    rows = [[format_primitive(obj[header], options, in_table=True) for header in headers] for obj in arr]
    widths = [max(len(label), *(len(row[i]) for row in rows)) for i, label in enumerate(labels)]

    base = _indent(options, level)
    lines = [_table_row(base, labels, widths)]
    lines.extend(_table_row(base, row, widths) for row in rows)
    return "\n".join(lines)


def _table_row(base: str, cells: Sequence[str], widths: Sequence[int]) -> str:
    """Render one padded table row.

    Args:
        base: Indentation prefix.
        cells: Formatted cells.
        widths: Column widths.

    Returns:
        Row text ``| a | b |``.
    """
    padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
    return f"{base}| {' | '.join(padded)} |"


def _is_dash_list(value: Any) -> bool:
    """Check if a mixed-array item is itself encoded as dash items.

    Args:
        value: Container item.

    Returns:
        True for a list or tuple classified as MIXED.

    Examples:
        >>> _is_dash_list([[1, 2]])
        True
        >>> _is_dash_list([1, 2])
        False
    """
    return isinstance(value, (list, tuple)) and classify_array(value) is ArrayKind.MIXED


def _encode_list_items(arr: Sequence[Any], options: EncodeOptions, level: int) -> str:
    """Encode a mixed array as dash items one level below ``level``.

    Container items are encoded two levels below ``level``. When that encoding
    spans several lines, or is itself a dash list, the dash stands alone and
    the block follows.

    Args:
        arr: Mixed array.
        options: Resolved encoding options.
        level: Indentation level of the owning key.

    Returns:
        Dash-list block.

    Examples:
        >>> print(_encode_list_items([1, {"a": 1}, {}, {"a": 1, "b": 2}], EncodeOptions(), 0))
          - 1
          - a: 1
          -
          -
            a: 1
            b: 2
        >>> print(_encode_list_items([[[1, 2]], 3], EncodeOptions(), 0))
          -
            - 1, 2
          - 3
    """
    dash = _indent(options, level + 1) + LIST_ITEM_MARKER
    lines = []
    for item in arr:
        if is_primitive(item):
            lines.append(f"{dash} {format_primitive(item, options)}")
            continue
        nested = _encode_nested(item, options, level + 2)
        if not nested:
            lines.append(dash)
        elif "\n" in nested or _is_dash_list(item):
            lines.append(dash)
            lines.append(nested)
        else:
            lines.append(f"{dash} {nested.lstrip()}")
    return "\n".join(lines)


def _encode_nested(value: Any, options: EncodeOptions, level: int) -> str:
    """Encode a container that is an item of a mixed array.

    Args:
        value: Dict, list or tuple.
        options: Resolved encoding options.
        level: Indentation level of the nested block.

    Returns:
        Encoded block (empty for an empty object).

    Raises:
        TypeError: If value is not a container.
    """
    if isinstance(value, dict):
        return _encode_object(value, options, level)
    if isinstance(value, (list, tuple)):
        kind = classify_array(value)
        if kind is ArrayKind.EMPTY:
            return EMPTY_ARRAY
        if kind is ArrayKind.PRIMITIVE:
            return _encode_inline(value, options)
        if kind is ArrayKind.TABLE:
            return _encode_table(value, options, level)
        return _encode_list_items(value, options, level - 1)
    raise TypeError(f"Object of type {type(value).__name__} is not MINT serializable")


def _encode_object(obj: Dict[Any, Any], options: EncodeOptions, level: int) -> str:
    """Encode a dict as key-value lines.

    Args:
        obj: Dictionary to encode.
        options: Resolved encoding options.
        level: Indentation level of the keys.

    Returns:
        Key-value block, or an empty string for an empty dict.

    Raises:
        TypeError: If a value is outside the JSON data model.

    Examples:
        >>> _encode_object({}, EncodeOptions(), 0)
        ''
        >>> print(_encode_object({"a": 1, "b": {"c": None}}, EncodeOptions(), 0))
        a: 1
        b:
          c: null
    """
    if not obj:
        return ""

    base = _indent(options, level)
    keys = sorted(obj, key=str) if options.sort_keys else list(obj)

    lines = []
    for key in keys:
        value = obj[key]
        prefix = f"{base}{encode_key(key)}:"
        if is_primitive(value):
            lines.append(f"{prefix} {format_primitive(value, options)}")
        elif isinstance(value, (list, tuple)):
            lines.append(_encode_array_field(prefix, value, options, level))
        elif isinstance(value, dict):
            nested = _encode_object(value, options, level + 1)
            lines.append(f"{prefix}\n{nested}" if nested else prefix)
        else:
            raise TypeError(f"Object of type {type(value).__name__} is not MINT serializable")

    return "\n".join(lines)


def _encode_array_field(prefix: str, arr: Sequence[Any], options: EncodeOptions, level: int) -> str:
    """Encode an array that is the value of an object key.

    Args:
        prefix: Indented ``key:`` text.
        arr: Array value.
        options: Resolved encoding options.
        level: Indentation level of the key.

    Returns:
        The key line, followed by a block for tables and mixed arrays.
    """
    kind = classify_array(arr)
    if kind is ArrayKind.EMPTY:
        return f"{prefix} {EMPTY_ARRAY}"
    if kind is ArrayKind.PRIMITIVE:
        return f"{prefix} {_encode_inline(arr, options)}"
    if kind is ArrayKind.TABLE:
        return f"{prefix}\n{_encode_table(arr, options, level + 1)}"
    return f"{prefix}\n{_encode_list_items(arr, options, level)}"
