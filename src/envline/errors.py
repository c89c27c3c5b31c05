# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while reading and parsing .env files."""

from __future__ import annotations


class EnvlineError(Exception):
    """Base exception for envline errors."""


class PathError(EnvlineError):
    """The environment file is not a regular file or cannot be read."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Unable to read the environment file at {path}.")


class FormatError(EnvlineError, ValueError):
    """A value cannot be decoded unambiguously.

    ``name`` and ``path`` are filled in as the error propagates out of the
    line and file parsers, so callers can report where it happened.
    """

    def __init__(self, message: str, name: str | None = None, path: object = None) -> None:
        self.message = message
        self.name = name
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        where = []
        if self.path is not None:
            where.append(str(self.path))
        if self.name is not None:
            where.append(f"variable {self.name}")
        if not where:
            return self.message
        return f"{': '.join(where)}: {self.message}"
