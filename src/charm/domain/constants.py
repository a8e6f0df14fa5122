from __future__ import annotations

"""
Domain Constants.

Version stamps and the fixed vocabulary shared by the configuration layer
and the CLI.
"""

from typing import Tuple

APP_NAME = "charm"
APP_VERSION = "0.4.0"
CURRENT_CONFIG_VERSION = "1.0.0"

CONFIG_FILE_NAME = "config.json"

COLOR_AUTO = "auto"
COLOR_ALWAYS = "always"
COLOR_NEVER = "never"
COLOR_MODES: Tuple[str, ...] = (COLOR_AUTO, COLOR_ALWAYS, COLOR_NEVER)

# Longest UTF-8 encoded unit
MAX_UNIT_LENGTH = 4
