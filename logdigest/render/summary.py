from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import Summary
from .common import console, format_counts, label


def _counts_table(title: str, column: str, entries) -> Table:
    t = Table(title=title, show_lines=True)
    t.add_column("#", justify="right")
    t.add_column(column)
    t.add_column("Count", justify="right")
    for idx, (name, count) in enumerate(entries, 1):
        t.add_row(str(idx), label(name), str(count))
    return t


def render_summary(summary: Summary, source: str | None = None):
    header = [
        "[bold]SUMMARY — log digest[/bold]",
        f"Source: {escape(source or '-')}",
        f"Total entries: {summary.total_entries}",
        f"Most frequent process: {escape(summary.most_frequent_process or '-')}",
        f"Most frequent hostname: {escape(summary.most_frequent_hostname or '-')}",
    ]
    console.print(Panel("\n".join(header), expand=False))

    pattern = []
    if summary.by_process:
        pattern.append("• Top processes: " + format_counts(summary.by_process))
    if summary.by_hostname:
        pattern.append("• Top hostnames: " + format_counts(summary.by_hostname))
    if summary.top_keywords:
        pattern.append("• Top keywords: " + ", ".join(label(k) for k in summary.top_keywords))
    if pattern:
        console.print(Panel("\n".join(pattern), title="PATTERN", expand=False))

    console.print(_counts_table("PROCESSES", "Process", summary.by_process))
    console.print(_counts_table("HOSTNAMES", "Hostname", summary.by_hostname))
    console.print(_counts_table("KEYWORDS", "Keyword", summary.by_keyword))

    if summary.parse_errors:
        errors = ", ".join(f"{kind} ({count})" for kind, count in summary.parse_errors.items())
        console.print(Panel(errors, title="PARSE ERRORS", expand=False))
