# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envline list`` command."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from envline.cli import _env_path, _load_env, _mask, cli, console


@cli.command("list")
@click.option("--show", is_flag=True, help="Show values instead of masking them.")
@click.pass_context
def list_keys(ctx: click.Context, show: bool) -> None:
    """List variable names with (masked) values."""
    env = _load_env(ctx)
    masked = ctx.obj["config"].mask and not show

    table = Table(title=f"Variables (file: {_env_path(ctx)})")
    table.add_column("Key", style="white")
    table.add_column("Value (masked)" if masked else "Value", style="dim")
    if not env:
        table.add_row("(empty)", "(empty)")
    else:
        for key, val in sorted(env.items()):
            if not val:
                display = "(empty)"
            else:
                display = _mask(val) if masked else val
            table.add_row(escape(key), escape(display))
    console.print(table)
