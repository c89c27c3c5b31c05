# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envline -- parse .env files with quoting, escapes and inline comments."""

from envline.env_file import parse_env_file, parse_lines
from envline.errors import EnvlineError, FormatError, PathError
from envline.sdk import dotenv_values, load_dotenv
from envline.value_parser import parse_value

__all__ = [
    "__version__",
    "EnvlineError",
    "FormatError",
    "PathError",
    "dotenv_values",
    "load_dotenv",
    "parse_env_file",
    "parse_lines",
    "parse_value",
]
__version__ = "0.1.0"
