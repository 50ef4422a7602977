# -*- coding: utf-8 -*-
"""Location: ./mint_format/validator.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

MINT syntax validation.

A single forward scan over the lines of a document. Problems are collected
into a ``ValidationResult``; nothing is raised.

Examples:
    >>> validate("name: Alice").valid
    True
    >>> result = validate("user:\\n   name: Alice")
    >>> result.valid, result.errors[0].message
    (False, 'Inconsistent indentation: 3 spaces (should be multiple of 2)')
"""

# Standard
from typing import List

# First-Party
from mint_format.constants import COMMENT_PREFIX, DEFAULT_INDENT, TABLE_MARKER
from mint_format.decoder import line_indent, normalize_newlines
from mint_format.models import ValidationIssue, ValidationResult
from mint_format.primitives import split_quoted


def count_pipes(trimmed: str) -> int:
    """Count the structural pipes of a table line.

    Pipes inside a quoted cell do not count.

    Args:
        trimmed: Table line without surrounding whitespace.

    Returns:
        Number of column separators, including the outer ones.

    Examples:
        >>> count_pipes("| a | b |")
        3
        >>> count_pipes('| "x|y" | b |')
        3
    """
    return len(split_quoted(trimmed, TABLE_MARKER)) - 1


def validate(text: str, indent: int = DEFAULT_INDENT) -> ValidationResult:
    """Validate MINT syntax.

    Args:
        text: MINT-formatted string.
        indent: Indentation unit every line's leading whitespace must be a multiple of.
            Values below 1 fall back to the default of 2.

    Returns:
        Validation result with every problem found.

    Examples:
        >>> result = validate("items:\\n  | id | name | value |\\n  | 1  | test |")
        >>> [(e.line, e.message) for e in result.errors]
        [(3, 'Table column mismatch: expected 3 columns, got 2')]
        >>> result = validate("| a | b |\\n| 1 | 2")
        >>> [(e.line, e.column, e.message) for e in result.errors]
        [(2, 1, 'Table column mismatch: expected 2 columns, got 1'), (2, 7, 'Table row must end with |')]
    """
    if indent < 1:
        indent = DEFAULT_INDENT
    errors: List[ValidationIssue] = []
    in_table = False
    table_pipes = 0

    for number, line in enumerate(normalize_newlines(text).split("\n"), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(COMMENT_PREFIX):
            continue

        spaces = line_indent(line)
        if spaces % indent:
            errors.append(
                ValidationIssue(
                    line=number,
                    column=1,
                    message=f"Inconsistent indentation: {spaces} spaces (should be multiple of {indent})",
                    context=line,
                )
            )

        if not trimmed.startswith(TABLE_MARKER):
            in_table = False
            table_pipes = 0
            continue

        pipes = count_pipes(trimmed)
        if not in_table:
            in_table = True
            table_pipes = pipes
        elif pipes != table_pipes:
            errors.append(
                ValidationIssue(
                    line=number,
                    column=1,
                    message=f"Table column mismatch: expected {table_pipes - 1} columns, got {pipes - 1}",
                    context=line,
                )
            )

        if not trimmed.endswith(TABLE_MARKER):
            errors.append(ValidationIssue(line=number, column=len(trimmed), message="Table row must end with |", context=line))

    return ValidationResult(valid=not errors, errors=errors)
