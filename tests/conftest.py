from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared builders for small path trees used across unit tests.
"""

import os
import sys
from typing import Callable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from pathtree.core.analysis.tree_builder import build_tree  # noqa: E402
from pathtree.domain.tree_models import Node  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_tree() -> Callable[..., Node]:
    """
    Return a factory that builds a synthetic root from a list of paths.

    Keyword arguments are forwarded to `build_tree`.
    """
    def _make(paths: List[str], **kwargs) -> Node:
        root, _ = build_tree(paths, **kwargs)
        return root

    return _make


@pytest.fixture
def nested_paths() -> List[str]:
    """Input lines for a two-level tree with shared prefixes."""
    return ["a/b/c", "a/b/d", "a/e"]
