# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envline CLI -- inspect, validate and export .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_load_env``, ``_mask``) live
here so every command module can import them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from envline import __version__
from envline.config import load_config
from envline.env_file import parse_env_file
from envline.errors import EnvlineError

console = Console(stderr=True)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _env_path(ctx: click.Context) -> Path:
    return ctx.obj["config"].resolve_env_file(ctx.obj["path"])


def _load_env(ctx: click.Context) -> dict[str, str]:
    """Parse the resolved .env file, turning parse errors into click errors."""
    path = _env_path(ctx)
    logger.debug("Parsing %s", path)
    try:
        env = parse_env_file(path)
    except EnvlineError as e:
        raise click.ClickException(str(e))
    logger.debug("Parsed %d variable(s)", len(env))
    return env


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--path", default=None,
    help="Path to the .env file (default: ENVLINE_PATH, env_file in .envline.toml, else .env).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, path: str | None, verbose: bool) -> None:
    """Parse and inspect .env files."""
    setup_logging(verbose)
    cfg = load_config()
    if cfg.config_path is not None:
        logger.debug("Loaded config from %s", cfg.config_path)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["path"] = path


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envline.cli import (  # noqa: E402, F401
    check_cmd,
    get_cmd,
    list_cmd,
    export_cmd,
)
