from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of application settings as JSON in the user
data directory. Loaded data is merged over defaults so new keys always
exist; unreadable files fall back to defaults.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from webstager.domain import constants as const
from webstager.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default editor session configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Editor
        "id_strategy": const.DEFAULT_ID_STRATEGY,
        "confirm_delete": True,

        # Appearance
        "appearance_mode": "System",
        "color_theme": "blue",
        "locale": "en",

        # Diagnostics
        "log_level": "INFO",
        "log_to_file": True,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": const.CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load application state from disk.

    Args:
        path: Config file to read; defaults to the user data directory.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    config_file = path or get_config_path()
    state = get_default_app_state()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)

    state["version"] = const.CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
        path: Target file; defaults to the user data directory.

    Returns:
        bool: True if the file was written.
    """
    config_file = path or get_config_path()
    payload = copy.deepcopy(state)
    payload["version"] = const.CURRENT_CONFIG_VERSION

    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_file)), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except (OSError, TypeError) as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_file}")
    return True


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Retrieve the active configuration (last session) directly."""
    return load_app_state(path)["last_session"]


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """Save the provided config as the 'last_session'."""
    state = load_app_state(path)
    state["last_session"] = dict(config)
    return save_app_state(state, path)
