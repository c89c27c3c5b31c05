# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envline CLI (run via ``envline`` or ``python -m envline``)."""

from __future__ import annotations

from envline.cli import cli


def main() -> None:
    """Run the CLI."""
    cli()


if __name__ == "__main__":
    main()
