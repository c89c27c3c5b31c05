# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decode the right-hand side of a ``NAME=VALUE`` line.

Quoted values (first character ``"`` or ``'``) go through a small
character-state scanner:

  - the closing quote must match the opening one
  - inside quotes, ``\\`` followed by the quote character or by ``\\`` yields
    that character; any other escape is kept verbatim, backslash included
  - after the closing quote only whitespace or a ``#`` comment may follow

Unquoted values are cut at the first `` #`` and must not contain whitespace.

All functions here are pure: they take a string and return a string or raise
:class:`~envline.errors.FormatError`.
"""

from __future__ import annotations

import re
import string
from enum import Enum

from envline.errors import FormatError

QUOTE_CHARS = ('"', "'")

_ESCAPE_CHAR = "\\"
_COMMENT_CHAR = "#"
_INLINE_COMMENT = " #"
_WHITESPACE = string.whitespace
_WHITESPACE_RE = re.compile(r"\s", re.ASCII)

_EXPECTED_QUOTE = "Expected the value to start with a quote."
_SPACES_NEED_QUOTES = "Values containing spaces must be surrounded by quotes."


class ScannerState(Enum):
    """States of the quoted-value scanner."""

    INITIAL = 0
    QUOTED = 1
    ESCAPE = 2
    TRAILING = 3
    COMMENT = 4


def parse_value(value: str) -> str:
    """Return the decoded form of a trimmed raw value."""
    if value == "":
        return ""
    if value[0] in QUOTE_CHARS:
        return parse_quoted_value(value)
    return parse_unquoted_value(value)


def parse_quoted_value(value: str) -> str:
    """Scan a value that starts with a quote character.

    A value whose closing quote is missing is *not* an error: the scanner
    runs out of input in the QUOTED or ESCAPE state and everything collected
    so far is returned.  Existing .env files rely on this, so keep it.

    >>> parse_quoted_value('"a \\\\"b\\\\" c" # note')
    'a "b" c'
    """
    quote = value[0] if value else ""
    buffer: list[str] = []
    state = ScannerState.INITIAL

    for char in value:
        if state is ScannerState.INITIAL:
            if char not in QUOTE_CHARS:
                raise FormatError(_EXPECTED_QUOTE)
            state = ScannerState.QUOTED
        elif state is ScannerState.QUOTED:
            if char == quote:
                state = ScannerState.TRAILING
            elif char == _ESCAPE_CHAR:
                state = ScannerState.ESCAPE
            else:
                buffer.append(char)
        elif state is ScannerState.ESCAPE:
            if char == quote or char == _ESCAPE_CHAR:
                buffer.append(char)
            else:
                buffer.append(_ESCAPE_CHAR + char)
            state = ScannerState.QUOTED
        elif state is ScannerState.TRAILING:
            if char == _COMMENT_CHAR:
                state = ScannerState.COMMENT
            elif char not in _WHITESPACE:
                raise FormatError(_SPACES_NEED_QUOTES)
        # ScannerState.COMMENT swallows the rest of the value.

    return "".join(buffer).strip(_WHITESPACE)


def parse_unquoted_value(value: str) -> str:
    """Strip an inline `` #`` comment and reject embedded whitespace."""
    head = value.split(_INLINE_COMMENT, 1)[0].strip(_WHITESPACE)
    if _WHITESPACE_RE.search(head):
        # Nothing but a comment, e.g. ``KEY=  # note``.
        if head.startswith(_COMMENT_CHAR):
            head = ""
        else:
            raise FormatError(_SPACES_NEED_QUOTES)
    return head.strip(_WHITESPACE)
