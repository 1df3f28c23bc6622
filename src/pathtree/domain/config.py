from __future__ import annotations

"""
Configuration Domain Management.

Holds the default runtime configuration and loads optional JSON
configuration files. Configuration is a plain dictionary validated by
the pipeline validator before use.
"""

import json
import logging
import os
from typing import Any, Dict, List

from pathtree.domain.errors import ConfigError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_SEPARATOR = "/"

CHARSETS: List[str] = ["unicode", "ascii"]
COLLAPSE_MODES: List[str] = ["single", "chain"]
EMPTY_SEGMENT_POLICIES: List[str] = ["preserve", "collapse", "reject"]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": "",
        "separator": DEFAULT_SEPARATOR,
        "empty_segments": "preserve",

        # Rendering
        "charset": "unicode",
        "collapse": "single",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load a configuration dictionary from a JSON file.

    Missing keys are not filled here; the validator merges defaults.

    Args:
        path: Path to a JSON document holding a single object.

    Returns:
        Dict[str, Any]: Raw configuration values from the file.

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object.
    """
    if not os.path.exists(path):
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read configuration '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration '{path}' must contain a JSON object, "
            f"found {type(data).__name__}."
        )

    logger.debug(f"Loaded configuration from {path} ({len(data)} keys)")
    return data
