"""Quote-aware tokenizer for op strings.

Splits on whitespace but respects quoted strings (single and double quotes).
Provides helpers for key:value token detection and parsing.
"""

from __future__ import annotations

import shlex


def tokenize(op_string: str) -> list[str]:
    """Split *op_string* on whitespace, respecting quoted substrings.

    Examples
    --------
    >>> tokenize('title "Blue in Green" key:Bb')
    ['title', 'Blue in Green', 'key:Bb']
    >>> tokenize("chord G7 beats:2")
    ['chord', 'G7', 'beats:2']
    """
    lexer = shlex.shlex(op_string, posix=True)
    lexer.whitespace_split = True
    lexer.whitespace = " \t\n\r"
    lexer.commenters = ""  # "#" is a sharp, not a comment
    return list(lexer)


def is_key_value(token: str) -> bool:
    """Return True if *token* is a ``key:value`` pair.

    The key must be non-empty and the token must contain no spaces, so
    quoted text such as ``"Song: Part 2"`` stays positional.
    """
    key, sep, _ = token.partition(":")
    return bool(sep) and bool(key) and " " not in token


def parse_key_value(token: str) -> tuple[str, str]:
    """Split *token* on the first ``:`` and return ``(key, value)``."""
    key, _, value = token.partition(":")
    return key.lower(), value
