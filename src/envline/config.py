# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".envline.toml configuration loading.

Searches upward from cwd for ``.envline.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".envline.toml"
DEFAULT_ENV_FILE = ".env"
PATH_ENV_VAR = "ENVLINE_PATH"


@dataclass
class EnvlineConfig:
    """Resolved configuration for the current invocation."""

    env_file: str = DEFAULT_ENV_FILE
    override: bool = True
    mask: bool = True
    config_path: Path | None = None

    def resolve_env_file(self, path: str | Path | None = None) -> Path:
        """Pick the .env file: argument, then ``ENVLINE_PATH``, then config.

        A relative ``env_file`` from the config file is taken relative to the
        directory holding that config file.
        """
        if path is not None:
            return Path(path)
        from_env = os.environ.get(PATH_ENV_VAR)
        if from_env:
            return Path(from_env)
        env_file = Path(self.env_file)
        if self.config_path is not None and not env_file.is_absolute():
            return self.config_path.parent / env_file
        return env_file


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envline.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnvlineConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvlineConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("envline", {})

    return EnvlineConfig(
        env_file=section.get("env_file", DEFAULT_ENV_FILE),
        override=bool(section.get("override", True)),
        mask=bool(section.get("mask", True)),
        config_path=path,
    )
