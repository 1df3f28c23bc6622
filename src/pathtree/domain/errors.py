from __future__ import annotations

"""
Domain Exceptions.

Failure types raised by the tree core and the configuration layer.
"""


class PathTreeError(Exception):
    """Base class for all pathtree errors."""


class InvalidPathError(PathTreeError, ValueError):
    """A path string was refused by the active empty-segment policy."""

    def __init__(self, path: str, reason: str = "contains an empty segment"):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}.")


class TreeIntegrityError(PathTreeError, RuntimeError):
    """The node graph violates a structural invariant (programming fault)."""


class ConfigError(PathTreeError):
    """A configuration source could not be read or parsed."""
