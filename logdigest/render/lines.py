from __future__ import annotations

from typing import Iterable

from rich.markup import escape

from .common import console


def render_lines(lines: Iterable[str]) -> int:
    """Echo raw lines unchanged. Returns how many were printed."""
    n = 0
    for line in lines:
        console.print(escape(line), highlight=False, soft_wrap=True)
        n += 1
    return n
