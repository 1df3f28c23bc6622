from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from pathtree.domain.config import CHARSETS, COLLAPSE_MODES, EMPTY_SEGMENT_POLICIES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the pathtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="pathtree",
        description=(
            "Read slash-delimited paths, one per line, and print them as a "
            "tree with a directory/file summary."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="File holding one path per line (default: standard input).",
    )
    p.add_argument(
        "--separator",
        default=None,
        help="Path segment separator (default: '/').",
    )
    p.add_argument(
        "--empty-segments",
        dest="empty_segments",
        choices=EMPTY_SEGMENT_POLICIES,
        default=None,
        help="How to treat empty segments such as 'a//b' (default: preserve).",
    )

    # --- Rendering ---
    p.add_argument(
        "--charset",
        choices=CHARSETS,
        default=None,
        help="Connector glyphs to draw with (default: unicode).",
    )
    p.add_argument(
        "--collapse",
        choices=COLLAPSE_MODES,
        default=None,
        help="Promote a lone top-level entry once, or along a chain (default: single).",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration values; flags override it.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually passed are included.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in ("input_path", "separator", "empty_segments", "charset", "collapse"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value

    return overrides
