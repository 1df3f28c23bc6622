from __future__ import annotations

"""
Path List Reading Component.

Streams path records from text streams and files, one record per line.
Only the line terminator is removed; callers receive every other
character untouched.
"""

from typing import Iterator, TextIO

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_lines(stream: TextIO) -> Iterator[str]:
    """
    Yield the lines of an open text stream without their terminators.

    Both `\\n` and `\\r\\n` endings are removed. A final line without a
    terminator is still yielded.

    Args:
        stream: Readable text stream (e.g. `sys.stdin`).

    Yields:
        str: One path record per line.
    """
    for line in stream:
        yield _strip_terminator(line)


def read_path_file(file_path: str) -> Iterator[str]:
    """
    Generate path records from a file on disk.

    Undecodable bytes are substituted rather than raising
    UnicodeDecodeError.

    Args:
        file_path: Path to a newline-delimited list of paths.

    Yields:
        str: One path record per line.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        yield from stream_lines(f)


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line
