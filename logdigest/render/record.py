from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import ParseError, Record
from .common import console


def render_record(line: str, result: Record | ParseError):
    console.print(Panel(escape(line) or "(empty line)", title="LINE", expand=False))

    if isinstance(result, ParseError):
        body = [
            f"[red]Kind:[/red] {result.kind.value}",
            f"Field: {result.field}",
            f"Token: {escape(result.token) if result.token is not None else '(missing)'}",
            f"Message: {escape(result.message)}",
        ]
        console.print(Panel("\n".join(body), title="PARSE ERROR", expand=False))
        return

    t = Table(title="RECORD", show_lines=True)
    t.add_column("Field")
    t.add_column("Value")
    for name in ("month", "day", "time", "hostname", "process", "pid", "message"):
        t.add_row(name, escape(getattr(result, name)))
    console.print(t)
