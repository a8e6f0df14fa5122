from __future__ import annotations

"""
Configuration Domain Management.

Display preferences persisted as JSON in the user data directory. The file
is optional; a missing or corrupt file yields the defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from charm.domain.constants import COLOR_AUTO, CONFIG_FILE_NAME, CURRENT_CONFIG_VERSION
from charm.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default display settings.
    """
    return {
        # Position column counts bytes instead of characters
        "count_bytes": False,

        # Extra columns
        "show_names": False,
        "show_scripts": False,

        # Presentation
        "color": COLOR_AUTO,
        "show_summary": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Unknown keys pass through untouched.

    Returns:
        Dict[str, Any]: The loaded configuration or the defaults on failure.
    """
    config = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Using defaults.")
        return config

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    stored = data.get("settings", {})
    if isinstance(stored, dict):
        config.update(stored)
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist ``config`` under the current schema version.

    Args:
        config: Settings to store.
    """
    state = {"version": CURRENT_CONFIG_VERSION, "settings": dict(config)}
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
