from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration of a scan and loads optional user
overrides from a JSON file in the application data directory. The
configuration is a plain dictionary so that the CLI, the file and the
defaults can be merged with the same shallow-update semantics.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from frisk.domain.constants import DEFAULT_IGNORE, UNLIMITED_DEPTH
from frisk.domain.tree_models import ScanMode
from frisk.infra.fs import get_config_file_path

logger = logging.getLogger(__name__)

# Keys accepted from the config file and the CLI
CONFIG_KEYS = ("path", "depth", "ignore", "compact", "mode", "workers", "color")

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
        # Scan
        "path": ".",
        "mode": ScanMode.CONCURRENT.value,
        "workers": None,

        # Rendering
        "depth": UNLIMITED_DEPTH,
        "ignore": list(DEFAULT_IGNORE),
        "compact": False,
        "color": None,  # None: auto-detect from the output stream
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the user configuration file merged over the defaults.

    A missing file is not an error. A corrupted file, or one that is not a
    JSON object, is reported and ignored.

    Args:
        config_file: Explicit file location. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: Merged configuration.
    """
    config = get_default_config()
    target = config_file or get_config_file_path()

    if not os.path.exists(target):
        logger.debug(f"Config file not found at {target}. Using defaults.")
        return config

    try:
        with open(target, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{target}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{target}'. Using defaults.")
        return config

    for key, value in data.items():
        if key in CONFIG_KEYS:
            config[key] = value
        else:
            logger.warning(f"Unknown config key '{key}' in {target} ignored.")

    logger.debug(f"Configuration loaded from {target}")
    return config


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
