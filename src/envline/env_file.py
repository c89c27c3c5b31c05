# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env files into key-value dicts.

Handles:
  - blank lines and full-line ``#`` comments
  - lines without ``=`` (ignored)
  - values with ``=`` in them (only the first ``=`` splits)
  - quoted values, escapes and inline comments (see :mod:`envline.value_parser`)

Later assignments to the same name win.  The result mapping is passed into
and returned from each step so callers can seed or inspect it.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from envline.errors import FormatError, PathError
from envline.value_parser import parse_value


@dataclass(frozen=True)
class Assignment:
    """A line split at its first ``=``, before value decoding."""

    name: str
    value: str | None = None


@dataclass(frozen=True)
class Variable:
    """A fully decoded ``NAME=VALUE`` pair."""

    name: str
    value: str


# ---------------------------------------------------------------------------
# Line source
# ---------------------------------------------------------------------------

def ensure_file_is_readable(path: str | Path) -> Path:
    """Return *path* as a Path, or raise PathError if it is not a readable file."""
    p = Path(path)
    if not p.is_file() or not os.access(p, os.R_OK):
        raise PathError(path)
    return p


def read_lines(path: str | Path) -> list[str]:
    """Read the lines of *path* with line endings stripped and empty lines dropped.

    ``\\n``, ``\\r\\n`` and bare ``\\r`` endings are all recognised; text mode
    turns them into ``\\n`` before the split.  A file that cannot be read or
    is not valid UTF-8 raises PathError.
    """
    p = ensure_file_is_readable(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PathError(path) from e
    return [line for line in text.split("\n") if line]


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

def is_comment(line: str) -> bool:
    """True if the first non-blank character of *line* is ``#``."""
    return line.lstrip().startswith("#")


def looks_like_assignment(line: str) -> bool:
    return "=" in line


# ---------------------------------------------------------------------------
# Splitting and sanitising
# ---------------------------------------------------------------------------

def split_assignment(name: str, value: str | None = None) -> Assignment:
    """Split a compound ``NAME=VALUE`` string into its parts.

    If *name* contains ``=`` it is split at the first one and *value* is
    disregarded.  Both halves are trimmed.
    """
    if "=" in name:
        name, value = (part.strip() for part in name.split("=", 1))
    return Assignment(name, value)


def sanitize_assignment(assignment: Assignment) -> Variable:
    """Decode the raw value of *assignment*; empty values skip the value parser."""
    value = (assignment.value or "").strip()
    if not value:
        return Variable(assignment.name, "")
    try:
        return Variable(assignment.name, parse_value(value))
    except FormatError as e:
        e.name = assignment.name
        raise


def normalise_variable(line: str) -> Variable:
    """Turn an assignment line into a decoded Variable."""
    return sanitize_assignment(split_assignment(line))


# ---------------------------------------------------------------------------
# Result mapping
# ---------------------------------------------------------------------------

def set_variable(env: dict[str, str], variable: Variable) -> dict[str, str]:
    env[variable.name] = variable.value
    return env


def apply_line(env: dict[str, str], line: str) -> dict[str, str]:
    """Fold one raw line into *env*; comments and non-assignments are skipped."""
    if is_comment(line) or not looks_like_assignment(line):
        return env
    return set_variable(env, normalise_variable(line))


def parse_lines(lines: Iterable[str], env: dict[str, str] | None = None) -> dict[str, str]:
    """Parse raw lines into a name -> value dict.

    Parsing stops at the first :class:`FormatError`.  When *env* is given it
    is updated in place, so variables from lines before the failing one stay
    in it.
    """
    result: dict[str, str] = {} if env is None else env
    for line in lines:
        result = apply_line(result, line)
    return result


def parse_env_file(path: str | Path, env: dict[str, str] | None = None) -> dict[str, str]:
    """Read a .env file and return an ordered dict of key-value pairs.

    Raises PathError before parsing starts if *path* cannot be read.
    """
    lines = read_lines(path)
    try:
        return parse_lines(lines, env)
    except FormatError as e:
        e.path = path
        raise
