# -*- coding: utf-8 -*-
"""Location: ./mint_format/decoder.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

MINT Decoder.

Reads MINT text line by line with an index cursor. Indentation is the only
nesting signal: a key with an empty value owns the more indented block that
follows it, which is a table (``|`` rows), a dash list (``-`` items) or a
nested object.

The decoder is lenient. Table rows with the wrong number of cells, stray
over-indented lines and lines without a key are dropped rather than raising.
In strict mode those drops are logged as warnings, otherwise at debug level.

Examples:
    >>> decode("name: Alice")
    {'name': 'Alice'}
    >>> decode("users:\\n  | id | name  |\\n  | 1  | Alice |\\n  | 2  | Bob   |")
    {'users': [{'id': 1, 'name': 'Alice'}, {'id': 2, 'name': 'Bob'}]}
    >>> decode("_: 1, 2, 3")
    [1, 2, 3]
    >>> decode("")
    {}
"""

# Standard
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

# First-Party
from mint_format.constants import COMMENT_PREFIX, EMPTY_ARRAY, INLINE_PIPE_SEPARATOR, INLINE_SEPARATOR, KEY_SEPARATOR, LIST_ITEM_MARKER, ROOT_ARRAY_KEY, TABLE_MARKER, URL_SCHEME_SEPARATOR
from mint_format.models import DecodeOptions
from mint_format.primitives import is_single_quoted, parse_primitive, quoted_token_end, split_quoted, unescape_string

logger = logging.getLogger(__name__)


def decode(text: str, options: Union[DecodeOptions, Mapping[str, Any], None] = None, **overrides: Any) -> Any:
    """Decode a MINT document to Python values.

    Args:
        text: MINT-formatted string.
        options: Decoding options as a model or mapping.
        **overrides: Option fields that take precedence over ``options``.

    Returns:
        The root value: a list for table and ``_:`` documents, otherwise a dict.

    Examples:
        >>> decode("items: []")
        {'items': []}
        >>> decode("# comment\\nname: Alice\\nage: 30")
        {'name': 'Alice', 'age': 30}
        >>> decode("| id | ok |\\n| 1 | true |")
        [{'id': 1, 'ok': True}]
        >>> decode("user:\\r\\n  id: 1\\r\\n  name: Alice")
        {'user': {'id': 1, 'name': 'Alice'}}
    """
    opts = DecodeOptions.resolve(options, **overrides)
    lines = normalize_newlines(text).split("\n")
    _check_indentation(lines, opts)

    start = _next_content(lines, 0)
    if start >= len(lines):
        return {}

    first = lines[start].strip()
    if first.startswith(TABLE_MARKER):
        return parse_table(lines, start, 0, opts)[0]
    if first.startswith(ROOT_ARRAY_KEY + KEY_SEPARATOR):
        return _decode_root_array(lines, start, opts)
    return parse_object(lines, start, 0, opts)[0]


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``.

    Args:
        text: Raw text.

    Returns:
        Text with ``\\n`` line endings only.

    Examples:
        >>> normalize_newlines("a\\r\\nb\\rc")
        'a\\nb\\nc'
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def line_indent(line: str) -> int:
    """Count the leading whitespace characters of a line.

    Args:
        line: Raw line.

    Returns:
        Indentation width.

    Examples:
        >>> line_indent("    key: value")
        4
    """
    return len(line) - len(line.lstrip())


def _is_ignorable(stripped: str) -> bool:
    """Check if a stripped line is blank or a comment.

    Args:
        stripped: Line without surrounding whitespace.

    Returns:
        True for blank and ``#`` lines.
    """
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def _is_list_item(stripped: str) -> bool:
    """Check if a stripped line is a dash list item.

    Args:
        stripped: Line without surrounding whitespace.

    Returns:
        True for ``-`` and ``- value`` lines.
    """
    return stripped == LIST_ITEM_MARKER or stripped.startswith(LIST_ITEM_MARKER + " ")


def _next_content(lines: List[str], index: int) -> int:
    """Find the next line that is neither blank nor a comment.

    Args:
        lines: Document lines.
        index: Index to start searching from.

    Returns:
        Index of the next content line, or ``len(lines)``.
    """
    while index < len(lines) and _is_ignorable(lines[index].strip()):
        index += 1
    return index


def _note_skipped(options: DecodeOptions, message: str) -> None:
    """Log a construct the lenient decoder dropped.

    Args:
        options: Resolved decoding options.
        message: Description of the dropped construct.
    """
    if options.strict:
        logger.warning(f"MINT decode: {message}")
    else:
        logger.debug(f"MINT decode: {message}")


def _check_indentation(lines: List[str], options: DecodeOptions) -> None:
    """Log content lines whose indentation is off the expected grid.

    Args:
        lines: Document lines.
        options: Resolved decoding options.
    """
    for number, line in enumerate(lines, start=1):
        if _is_ignorable(line.strip()):
            continue
        indent = line_indent(line)
        if indent % options.indent:
            _note_skipped(options, f"line {number} is indented {indent} spaces, not a multiple of {options.indent}")


def _decode_root_array(lines: List[str], start: int, options: DecodeOptions) -> List[Any]:
    """Decode a document whose first statement uses the root-array key.

    Args:
        lines: Document lines.
        start: Index of the ``_:`` line.
        options: Resolved decoding options.

    Returns:
        The root array.

    Examples:
        >>> _decode_root_array(["_: []"], 0, DecodeOptions())
        []
        >>> _decode_root_array(["_: hello"], 0, DecodeOptions())
        ['hello']
        >>> _decode_root_array(['_: "a, b", c'], 0, DecodeOptions())
        ['a, b', 'c']
        >>> _decode_root_array(["_:", "  - 1", "  -", "    a: 1"], 0, DecodeOptions())
        [1, {'a': 1}]
    """
    value_text = lines[start].strip()[len(ROOT_ARRAY_KEY + KEY_SEPARATOR) :].strip()

    if value_text in ("", EMPTY_ARRAY):
        index = _next_content(lines, start + 1)
        if index < len(lines):
            stripped = lines[index].strip()
            if stripped.startswith(TABLE_MARKER):
                return parse_table(lines, index, line_indent(lines[index]), options)[0]
            if _is_list_item(stripped):
                return parse_list(lines, index, line_indent(lines[index]), options)[0]
        return []

    return [parse_primitive(fragment) for fragment in split_quoted(value_text, INLINE_SEPARATOR)]


def split_key_value(stripped: str) -> Optional[Tuple[str, str]]:
    """Split a statement into key and value text on its first colon.

    A leading double-quoted key is unescaped and may contain colons.

    Args:
        stripped: Statement without surrounding whitespace.

    Returns:
        ``(key, value_text)``, or None when the line has no colon.

    Examples:
        >>> split_key_value("url: https://example.com")
        ('url', 'https://example.com')
        >>> split_key_value('"a:b": 1')
        ('a:b', '1')
        >>> split_key_value("no colon here") is None
        True
    """
    if stripped.startswith('"'):
        end = quoted_token_end(stripped)
        if end != -1:
            rest = stripped[end + 1 :].lstrip()
            if rest.startswith(KEY_SEPARATOR):
                return unescape_string(stripped[1:end]), rest[1:].strip()

    colon = stripped.find(KEY_SEPARATOR)
    if colon == -1:
        return None
    return stripped[:colon].strip(), stripped[colon + 1 :].strip()


def parse_value_text(text: str) -> Any:
    """Parse the inline value of a ``key: value`` statement.

    Args:
        text: Non-empty value text.

    Returns:
        A primitive, or a list for ``" | "`` or ``", "`` separated values.

    Examples:
        >>> parse_value_text("a, b, c")
        ['a', 'b', 'c']
        >>> parse_value_text("1 | 2")
        [1, 2]
        >>> parse_value_text('"Hello, World!"')
        'Hello, World!'
        >>> parse_value_text("19.99")
        19.99
    """
    if is_single_quoted(text):
        return parse_primitive(text)
    for separator in (INLINE_PIPE_SEPARATOR, INLINE_SEPARATOR):
        if separator in text:
            fragments = split_quoted(text, separator)
            if len(fragments) > 1:
                return [parse_primitive(fragment) for fragment in fragments]
    return parse_primitive(text)


def parse_object(lines: List[str], start: int, base_indent: int, options: DecodeOptions) -> Tuple[Dict[str, Any], int]:
    """Parse key-value statements at one indentation level.

    Lines indented less than ``base_indent`` end the block. More indented
    lines are only consumed through the lookahead of a key with an empty
    value; anywhere else they are dropped.

    Args:
        lines: Document lines.
        start: Index of the first line of the block.
        base_indent: Indentation of the block's keys.
        options: Resolved decoding options.

    Returns:
        Tuple of (decoded dict, index of the first line after the block).

    Examples:
        >>> parse_object(["a: 1", "b:", "  c: 2", "d: x"], 0, 0, DecodeOptions())
        ({'a': 1, 'b': {'c': 2}, 'd': 'x'}, 4)
        >>> parse_object(["  a: 1", "b: 2"], 0, 2, DecodeOptions())
        ({'a': 1}, 1)
    """
    result: Dict[str, Any] = {}
    i = start

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()
        if _is_ignorable(stripped):
            i += 1
            continue

        indent = line_indent(line)
        if indent < base_indent:
            break
        if indent > base_indent:
            _note_skipped(options, f"line {i + 1} is more indented than its block and has no owning key")
            i += 1
            continue

        if stripped.startswith(TABLE_MARKER):
            _note_skipped(options, f"line {i + 1} is a table row outside a table block")
            i += 1
            continue

        entry = split_key_value(stripped)
        if entry is None:
            _note_skipped(options, f"line {i + 1} has no key")
            i += 1
            continue

        key, value_text = entry
        if value_text in ("", EMPTY_ARRAY):
            result[key], i = _parse_block_value(lines, i, indent, value_text, options)
            continue

        result[key] = parse_value_text(value_text)
        i += 1

    return result, i


def _parse_block_value(lines: List[str], index: int, owner_indent: int, value_text: str, options: DecodeOptions) -> Tuple[Any, int]:
    """Resolve the value of a key (or dash) with nothing after it.

    Args:
        lines: Document lines.
        index: Index of the owning line.
        owner_indent: Indentation of the owning line.
        value_text: ``""`` or ``"[]"``.
        options: Resolved decoding options.

    Returns:
        Tuple of (value, index of the first line after it).
    """
    nested = _next_content(lines, index + 1)
    if nested < len(lines):
        indent = line_indent(lines[nested])
        stripped = lines[nested].strip()
        if indent > owner_indent:
            if stripped.startswith(TABLE_MARKER):
                return parse_table(lines, nested, indent, options)
            if _is_list_item(stripped):
                return parse_list(lines, nested, indent, options)
            return parse_object(lines, nested, indent, options)

    return ([] if value_text == EMPTY_ARRAY else {}), index + 1


def _row_cells(stripped: str) -> List[str]:
    """Split a table row into cell texts, dropping the outer fragments.

    Args:
        stripped: Row without surrounding whitespace.

    Returns:
        Untrimmed cell texts.
    """
    return split_quoted(stripped, TABLE_MARKER)[1:-1]


def parse_table(lines: List[str], start: int, indent: int, options: Optional[DecodeOptions] = None) -> Tuple[List[Dict[str, Any]], int]:
    """Parse a pipe table starting at its header row.

    Rows whose cell count differs from the header's are dropped.

    Args:
        lines: Document lines.
        start: Index of the header row.
        indent: Indentation of the header row.
        options: Resolved decoding options.

    Returns:
        Tuple of (row dicts, index of the first line after the table).

    Examples:
        >>> rows, end = parse_table(["| id | v |", "| 1 | - |", "| 2 |", "| 3 | x |"], 0, 0)
        >>> rows
        [{'id': 1, 'v': None}, {'id': 3, 'v': 'x'}]
        >>> end
        4
    """
    options = options or DecodeOptions()
    headers = [name.strip() for name in _row_cells(lines[start].strip())]
    rows: List[Dict[str, Any]] = []
    i = start + 1

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()
        if not stripped:
            following = i
            while following < len(lines) and not lines[following].strip():
                following += 1
            if following < len(lines) and lines[following].strip().startswith(TABLE_MARKER) and line_indent(lines[following]) >= indent:
                i = following
                continue
            break

        if not stripped.startswith(TABLE_MARKER) or line_indent(line) < indent:
            break

        cells = [parse_primitive(cell) for cell in _row_cells(stripped)]
        if len(cells) == len(headers):
            rows.append(dict(zip(headers, cells)))
        else:
            _note_skipped(options, f"line {i + 1} has {len(cells)} cells, table header has {len(headers)}")
        i += 1

    return rows, i


def parse_list(lines: List[str], start: int, indent: int, options: DecodeOptions) -> Tuple[List[Any], int]:
    """Parse a block of dash items.

    Args:
        lines: Document lines.
        start: Index of the first item.
        indent: Indentation of the dashes.
        options: Resolved decoding options.

    Returns:
        Tuple of (items, index of the first line after the list).

    Examples:
        >>> items, end = parse_list(["- 1", "- a: x", "- []", "-", "  | k |", "  | v |"], 0, 0, DecodeOptions())
        >>> items
        [1, {'a': 'x'}, [], [{'k': 'v'}]]
    """
    items: List[Any] = []
    i = start

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()
        if _is_ignorable(stripped):
            i += 1
            continue

        current = line_indent(line)
        if current < indent:
            break
        if current > indent:
            _note_skipped(options, f"line {i + 1} is more indented than its list item")
            i += 1
            continue
        if not _is_list_item(stripped):
            break

        rest = stripped[len(LIST_ITEM_MARKER) :].strip()
        if rest:
            items.append(_parse_list_item(rest))
            i += 1
        else:
            value, i = _parse_block_value(lines, i, current, "", options)
            items.append(value)

    return items, i


def _split_item_key(text: str) -> Optional[Tuple[str, str]]:
    """Split ``key: value`` on a dash line.

    Only the first colon outside quotes can separate a key, and a ``://``
    colon never does.

    Args:
        text: Item text after the dash.

    Returns:
        ``(key, value_text)``, or None when the item is not a key-value pair.

    Examples:
        >>> _split_item_key("url: https://a.io")
        ('url', 'https://a.io')
        >>> _split_item_key('a, "b:c"') is None
        True
    """
    if text.startswith('"'):
        end = quoted_token_end(text)
        if end == -1:
            return None
        rest = text[end + 1 :].lstrip()
        if not rest.startswith(KEY_SEPARATOR):
            return None
        return unescape_string(text[1:end]), rest[1:].strip()

    fragments = split_quoted(text, KEY_SEPARATOR)
    if len(fragments) < 2:
        return None
    key = fragments[0]
    colon = len(key)
    if not key.strip() or '"' in key or text.startswith(URL_SCHEME_SEPARATOR, colon):
        return None
    return key.strip(), text[colon + 1 :].strip()


def _parse_list_item(text: str) -> Any:
    """Parse the text after ``- `` on a dash line.

    Args:
        text: Non-empty item text.

    Returns:
        A primitive, an inline list or a single-key dict.

    Examples:
        >>> _parse_list_item("https://example.com")
        'https://example.com'
        >>> _parse_list_item("tags: a, b")
        {'tags': ['a', 'b']}
        >>> _parse_list_item("1, 2")
        [1, 2]
        >>> _parse_list_item('"x: y"')
        'x: y'
    """
    if text == EMPTY_ARRAY:
        return []
    if is_single_quoted(text):
        return parse_primitive(text)

    entry = _split_item_key(text)
    if entry is not None:
        key, value_text = entry
        if value_text == EMPTY_ARRAY:
            return {key: []}
        if not value_text:
            return {key: {}}
        return {key: parse_value_text(value_text)}

    fragments = split_quoted(text, INLINE_SEPARATOR)
    if len(fragments) > 1:
        return [parse_primitive(fragment) for fragment in fragments]
    return parse_primitive(text)
