# showcli/config.py
"""Command registry and application configuration for show."""

from showcli import __version__
from showcli.registry import LIST_ALL_TOKEN
# Import all command modules to trigger decorator registration
import showcli.commands  # noqa: F401

PROGRAM_NAME = "show"

VERSION_BANNER = f"""{PROGRAM_NAME} {__version__}
Copyright (C) 2019-2020 Hatter Jiang.
License MIT <https://opensource.org/licenses/MIT>

Written by Hatter Jiang
"""
