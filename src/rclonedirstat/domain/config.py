from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and loads user overrides from
an optional JSON file. CLI flags are merged on top by the interface layer.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from rclonedirstat.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"

# A single space never starts a rooted path; treated as "no filter".
DEFAULT_PREFIX = " "


def get_config_path() -> str:
    """Return the default location of the user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "file": "-",
        "prefix": DEFAULT_PREFIX,

        # Rendering
        "depth": 0,
        "human": False,
        "size_precision": 2,
        "skip_empty_in_tree": True,

        # Aggregation
        "propagate_invalidation": False,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration file merged over the defaults.

    Unknown keys are dropped. A missing or corrupted file yields the
    defaults; values are not type-checked here (see config_validator).

    Args:
        path: JSON file to read; defaults to the per-user config file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    for key, value in data.items():
        if key in config:
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key: {key}")

    return config
