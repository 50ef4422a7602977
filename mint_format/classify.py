# -*- coding: utf-8 -*-
"""Location: ./mint_format/classify.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Array classification for the MINT encoder.

Every array is rendered in one of four shapes. Classification is pure value
inspection and is kept apart from formatting so it can be tested on its own.

Examples:
    >>> classify_array([])
    <ArrayKind.EMPTY: 'empty'>
    >>> classify_array([1, "two", None])
    <ArrayKind.PRIMITIVE: 'primitive'>
    >>> classify_array([{"id": 1}, {"id": 2}])
    <ArrayKind.TABLE: 'table'>
    >>> classify_array([{"id": 1}, {"name": "x"}])
    <ArrayKind.MIXED: 'mixed'>
"""

# Standard
from enum import Enum
from typing import Any, Sequence

# First-Party
from mint_format.constants import TABLE_MARKER
from mint_format.primitives import is_primitive


class ArrayKind(str, Enum):
    """How an array is rendered.

    Attributes:
        EMPTY: ``[]``.
        PRIMITIVE: inline ``a, b, c`` list.
        TABLE: pipe-delimited table block.
        MIXED: dash-prefixed list block.
    """

    EMPTY = "empty"
    PRIMITIVE = "primitive"
    TABLE = "table"
    MIXED = "mixed"


def is_table_safe_key(key: Any) -> bool:
    """Check if a key can be used as a table column name.

    Args:
        key: Object key.

    Returns:
        True if the key survives header splitting and trimming unchanged.

    Examples:
        >>> is_table_safe_key("name")
        True
        >>> is_table_safe_key("a|b"), is_table_safe_key(" pad"), is_table_safe_key("")
        (False, False, False)
    """
    text = str(key)
    if not text or text != text.strip():
        return False
    return not any(char in text for char in (TABLE_MARKER, '"', "\n", "\r"))


def is_table_array(arr: Sequence[Any]) -> bool:
    """Check if array qualifies for the table format.

    All elements must be dicts with the same key set (order-independent),
    at least one table-safe key, and only primitive values.

    Args:
        arr: Array to check.

    Returns:
        True if a table can represent the array.

    Examples:
        >>> is_table_array([{"a": 1, "b": 2}, {"b": 3, "a": 4}])
        True
        >>> is_table_array([{"a": {"nested": 1}}])
        False
        >>> is_table_array([{}, {}])
        False
    """
    if not arr or not all(isinstance(item, dict) for item in arr):
        return False

    first_keys = set(arr[0].keys())
    if not first_keys or not all(is_table_safe_key(key) for key in first_keys):
        return False

    for obj in arr[1:]:
        if set(obj.keys()) != first_keys:
            return False

    return all(is_primitive(value) for obj in arr for value in obj.values())


def classify_array(arr: Sequence[Any]) -> ArrayKind:
    """Classify an array for encoding.

    Args:
        arr: Array (list or tuple) to classify.

    Returns:
        The rendering shape.
    """
    if not arr:
        return ArrayKind.EMPTY
    if all(is_primitive(item) for item in arr):
        return ArrayKind.PRIMITIVE
    if is_table_array(arr):
        return ArrayKind.TABLE
    return ArrayKind.MIXED
