"""
SQL identifier handling utilities.

Provides the single identifier escaping policy used by every clause builder.
Identifiers are wrapped in backticks segment by segment; expressions that are
not plain identifiers (aggregates such as ``COUNT(*)``) pass through, and
anything containing characters judged unsafe is dropped to an empty string.
"""

import re
from decimal import Decimal
from typing import Any

DEFAULT_ESCAPE_CHAR = "`"

# Segments made of these characters are wrapped in the escape character
_IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9_$]*$")

# Segments containing anything outside this set are dropped
_PASSTHROUGH_RE = re.compile(r"^[A-Za-z0-9_$*/+\-()]*$")

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric(value: Any) -> bool:
    """
    Tell whether a value is a number or a numeric string.

    Booleans are not considered numeric.

    Examples:
        >>> is_numeric(10)
        True
        >>> is_numeric(" 1.5e3")
        True
        >>> is_numeric("hello")
        False
        >>> is_numeric(True)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.match(value))
    return False


def _escape_segment(segment: str, escape_char: str) -> str:
    if _IDENTIFIER_RE.match(segment):
        return f"{escape_char}{segment}{escape_char}"
    if not _PASSTHROUGH_RE.match(segment):
        return ""
    return segment


def escape_identifier(word: Any, escape_char: str = DEFAULT_ESCAPE_CHAR) -> str:
    """
    Escape a table name, column name or simple expression.

    Args:
        word: Identifier or expression to escape
        escape_char: Quote character wrapped around each identifier segment

    Returns:
        Escaped identifier, or an empty string when the input cannot be
        used as an identifier

    Examples:
        >>> escape_identifier("users.id")
        '`users`.`id`'
        >>> escape_identifier("uid as id")
        '`uid` AS `id`'
        >>> escape_identifier("COUNT(*)")
        'COUNT(*)'
        >>> escape_identifier("name;")
        ''
    """
    if not isinstance(word, str) or is_numeric(word):
        return ""

    tokens = []
    for token in word.split(" "):
        if token.lower() == "as":
            tokens.append("AS")
            continue
        tokens.append(
            ".".join(_escape_segment(segment, escape_char) for segment in token.split("."))
        )

    return " ".join(tokens)
