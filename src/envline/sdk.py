# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from envline.config import load_config
from envline.env_file import parse_env_file

logger = logging.getLogger(__name__)


def _resolve_path(path: str | Path | None) -> Path:
    """Resolve the .env path from args, env, and config (same as CLI)."""
    resolved = load_config().resolve_env_file(path)
    logger.debug("Using env file %s", resolved)
    return resolved


def dotenv_values(path: str | Path | None = None) -> dict[str, str]:
    """Return the variables of a .env file as a dict without modifying os.environ.

    Parameters
    ----------
    path : str or Path, optional
        File to parse. Defaults from ENVLINE_PATH, then ``env_file`` in
        ``.envline.toml``, then ``.env``.

    Returns
    -------
    dict[str, str]
        Mapping of variable name to decoded value.

    Raises
    ------
    PathError
        The file does not exist or cannot be read.
    FormatError
        A value cannot be decoded.
    """
    return parse_env_file(_resolve_path(path))


def load_dotenv(
    path: str | Path | None = None,
    override: bool | None = None,
    verbose: bool = False,
) -> bool:
    """Load a .env file into os.environ (python-dotenv compatible API).

    Parameters
    ----------
    path : str or Path, optional
        File to parse. Same resolution as :func:`dotenv_values`.
    override : bool, optional
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set (matches python-dotenv semantics).
        Defaults from ``override`` in ``.envline.toml``, else True.
    verbose : bool, default False
        If True, log a warning when the file holds no variables.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from envline import load_dotenv
    >>> load_dotenv()  # ENVLINE_PATH, config, or ./.env
    True
    >>> load_dotenv(".env.local", override=False)  # keep existing env vars
    False
    """
    cfg = load_config()
    resolved = cfg.resolve_env_file(path)
    if override is None:
        override = cfg.override
    values = parse_env_file(resolved)
    if not values:
        if verbose:
            logger.warning("No variables found in %s", resolved)
        return False
    count = 0
    for key, value in values.items():
        if key in os.environ and not override:
            logger.debug("Keeping existing %s", key)
            continue
        os.environ[key] = value
        count += 1
    logger.debug("Set %d of %d variable(s) from %s", count, len(values), resolved)
    return count > 0
