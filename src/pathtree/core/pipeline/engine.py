from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one report run:
1. Validates configuration.
2. Builds the path trie from the supplied records.
3. Counts directories and files on the full tree.
4. Collapses the synthetic root.
5. Renders the tree and the summary.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from pathtree.core.analysis.tree_builder import build_tree, collapse_root, count_nodes
from pathtree.core.analysis.tree_renderer import (
    compose_report,
    format_summary,
    render_lines,
)
from pathtree.core.pipeline.validator import validate_config
from pathtree.domain.tree_models import TreeReport

logger = logging.getLogger(__name__)


def run_pipeline(
        paths: Iterable[str],
        config: Optional[Dict[str, Any]] = None,
) -> TreeReport:
    """
    Turn a sequence of path strings into a rendered tree report.

    Args:
        paths: Path records, consumed once and in order.
        config: Raw or partial configuration; defaults fill the gaps.

    Returns:
        TreeReport: Rendered text, tree lines and totals.

    Raises:
        InvalidPathError: If a record is refused by the "reject" policy.
    """
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # 1) Trie construction
    root, inserted = build_tree(
        paths,
        separator=cfg["separator"],
        empty_segments=cfg["empty_segments"],
    )

    # 2) Totals are taken before collapsing so promoted nodes still count
    counts = count_nodes(root)
    logger.debug(f"Counted {counts.total} node(s) below the synthetic root")

    # 3) Rendering
    display = collapse_root(root, cfg["collapse"], separator=cfg["separator"])
    lines = render_lines(display, charset=cfg["charset"])
    text = compose_report(lines, counts)

    logger.info(f"Rendered {inserted} path(s): {format_summary(counts)}")
    return TreeReport(text=text, lines=lines, counts=counts, inserted=inserted)
