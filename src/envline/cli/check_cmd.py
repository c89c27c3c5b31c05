# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envline check`` -- validate a .env file."""

from __future__ import annotations

import click

from envline.cli import _env_path, _load_env, cli, console


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Parse the .env file and report whether every value decodes."""
    env = _load_env(ctx)
    console.print(f"[green]{_env_path(ctx)}: {len(env)} variable(s) OK[/green]")
