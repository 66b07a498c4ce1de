from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(force_terminal=True)


def label(name: str) -> str:
    return escape(name) if name else "(empty)"


def format_counts(entries) -> str:
    return ", ".join(f"{label(name)} ({count})" for name, count in entries)
