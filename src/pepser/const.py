"""
Element sets used by the built-in parsers.
"""

from __future__ import annotations
from typing import Final

WHITESPACES: Final[frozenset[str]] = frozenset({" ", "\t", "\n", "\r", "\f"})
JSON_WHITESPACES: Final[frozenset[str]] = frozenset({" ", "\t", "\n", "\r"})
DECIMAL: Final[frozenset[str]] = frozenset("0123456789")
NONZERO_DECIMAL: Final[frozenset[str]] = DECIMAL - {"0"}
HEXADECIMAL: Final[frozenset[str]] = DECIMAL | frozenset("abcdefABCDEF")

# escape character -> decoded text, for the characters following a backslash
JSON_ESCAPES: Final[dict[str, str]] = {
    '"': '"',
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}
