from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, JSON file, flags), reading the path records,
running the pipeline and writing the single report to stdout.
"""

import json
import os
import sys
from typing import Any, Dict, Iterable, List, Optional

from pathtree.core.pipeline.engine import run_pipeline
from pathtree.core.pipeline.reader import read_path_file, stream_lines
from pathtree.core.pipeline.validator import validate_config
from pathtree.domain.config import get_default_config, load_config
from pathtree.domain.errors import ConfigError, InvalidPathError
from pathtree.infra.logging import LoggingConfig, configure_logging, get_logger
from pathtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (stderr only, stdout carries the report)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (defaults vs JSON file)
    try:
        base_conf = load_config(args.config_file) if args.config_file else get_default_config()
    except ConfigError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Pre-flight input verification
    input_path = clean_conf.get("input_path", "")
    if input_path and not os.path.isfile(input_path):
        msg = f"Input file does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE

    # 6. Pipeline execution phase
    logger.debug(f"Reading paths from {input_path or '<stdin>'}")
    try:
        report = run_pipeline(_open_records(input_path), clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except InvalidPathError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except (OSError, UnicodeDecodeError) as e:
        # Read failures abort before anything reaches stdout
        logger.critical(f"Failed to read input: {e}", exc_info=True)
        print(f"ERROR: Failed to read input: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output rendering phase
    sys.stdout.write(report.text)
    sys.stdout.flush()
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def _open_records(input_path: str) -> Iterable[str]:
    """Choose the record source: a file when a path is set, else stdin."""
    if input_path:
        return read_path_file(input_path)
    return stream_lines(sys.stdin)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
