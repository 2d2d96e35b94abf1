from __future__ import annotations

"""
Configuration Domain Management.

Holds the static site metadata and build settings as a plain dictionary,
and handles loading/saving that dictionary from a project-local JSON file
with default fallback.
"""

import json
import logging
import os
from typing import Any, Dict

from docnav.domain.constants import (
    DEFAULT_HOME_LINK,
    DEFAULT_HOME_TEXT,
    DEFAULT_ROOT_GROUP_TEXT,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_CONFIG_FILE = "docnav.json"
DEFAULT_DOCS_DIR = "docs"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default build configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "docs_dir": DEFAULT_DOCS_DIR,
        "output_file": "",

        # Site Metadata
        "title": "Docs",
        "description": "",
        "src_dir": DEFAULT_DOCS_DIR,
        "base": "/",

        # Navigation
        "home_text": DEFAULT_HOME_TEXT,
        "home_link": DEFAULT_HOME_LINK,
        "root_group_text": DEFAULT_ROOT_GROUP_TEXT,
        "social_links": [],
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """
    Load the build configuration from a JSON file, merged over defaults.

    Unknown keys are dropped. A missing file yields the defaults; a corrupt
    one is reported and also yields the defaults.

    Args:
        path: Location of the JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()

    if not os.path.exists(path):
        logger.debug(f"Config file '{path}' not found. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    for key, value in data.items():
        if key in config:
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key '{key}'")

    return config


def save_config(config: Dict[str, Any], path: str = DEFAULT_CONFIG_FILE) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Target JSON file.

    Returns:
        bool: True if the file was written.
    """
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
