from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and loading of JSON configuration
files layered on top of it. The tree itself is never persisted; only the
options that drive a run are.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": "",

        # Parsing
        "skip_blank": True,

        # Output Format
        "print_tree": True,
        "json_output": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_path: str = "") -> Dict[str, Any]:
    """
    Load a JSON configuration file merged over the defaults.

    A missing or unreadable file is not an error: the defaults are returned and
    the problem is logged.

    Args:
        config_path: Path to a JSON object file. Empty means defaults only.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()

    if not config_path:
        return config

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {config_path}")
    return config
