from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration sources (defaults, JSON files, CLI
overrides) and the pipeline. Coerces types, checks enumerated options
and injects defaults so the engine always receives a complete, typed
configuration.
"""

import logging
from typing import Any, Dict, List, Tuple

from pathtree.domain.config import (
    CHARSETS,
    COLLAPSE_MODES,
    EMPTY_SEGMENT_POLICIES,
    get_default_config,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    # 2. Unknown keys are dropped
    for key in config:
        if key not in defaults:
            msg = f"Unknown configuration key '{key}'."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    # 3. Schema Definition (Declarative mapping)
    choice_fields = {
        "charset": CHARSETS,
        "collapse": COLLAPSE_MODES,
        "empty_segments": EMPTY_SEGMENT_POLICIES,
    }

    # 4. Field Processing & Normalization
    merged["input_path"] = _as_str(
        merged.get("input_path"), defaults["input_path"], "input_path", warnings, strict
    )
    merged["separator"] = _as_separator(
        merged.get("separator"), defaults["separator"], warnings, strict
    )

    for field, choices in choice_fields.items():
        merged[field] = _as_choice(
            merged.get(field), defaults[field], choices, field, warnings, strict
        )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        fallback: str,
        choices: List[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Accept only one of the enumerated option names (case-insensitive)."""
    if value is None:
        return fallback

    if isinstance(value, str):
        v = value.strip().lower()
        if v in choices:
            return v
        msg = f"Invalid field '{field}': '{value}' is not one of {', '.join(choices)}."
        if strict:
            raise ValueError(msg)
    else:
        msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)

    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _as_separator(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Separators are used verbatim; whitespace is significant."""
    if value is None:
        return fallback
    if isinstance(value, str) and value:
        return value

    msg = "Invalid field 'separator': expected a non-empty string."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
