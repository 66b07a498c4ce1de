from __future__ import annotations

from pathlib import Path
from typing import Iterator


def strip_terminator(line: str) -> str:
    """Drop one trailing "\\n", then one trailing "\\r". Lone "\\r" inside a line stays."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def split_lines(text: str) -> list[str]:
    """
    Split text on "\\n" only. Other characters str.splitlines() treats as
    breaks (lone "\\r", "\\x0b", "\\x0c", "\\x1c".."\\x1e", "\\x85", "\\u2028")
    stay inside the line. A final terminator does not open an empty line.
    """
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [strip_terminator(p) for p in parts]


def _iter_lines(p: Path) -> Iterator[str]:
    # newline="\n": only "\n" ends a line, and "\r\n" is not translated.
    with p.open(encoding="utf-8", errors="ignore", newline="\n") as f:
        for line in f:
            yield strip_terminator(line)


def read_lines(path: str | Path) -> Iterator[str]:
    """
    Stage 1: RAW LINES
    - Accepts a single log file (no directories, no rotated siblings)
    - Yields each line without its line terminator
    - Only "\\n" ends a line; one "\\r" before it is dropped
    - Undecodable bytes are dropped, lines are never skipped

    Raises FileNotFoundError up front, before any line is read.
    """
    p = Path(path)

    if not p.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    return _iter_lines(p)
