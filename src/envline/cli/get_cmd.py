# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envline get`` command."""

from __future__ import annotations

import click

from envline.cli import _load_env, cli


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print a single decoded value."""
    env = _load_env(ctx)
    if key not in env:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(env[key])
