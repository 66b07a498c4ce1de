from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel

from ..models import AuditReport
from .common import console, format_counts


def render_audit(report: AuditReport, source: str | None = None):
    header = [
        "[bold]AUDIT — unparsed lines[/bold]",
        f"Source: {escape(source or '-')}",
        f"Lines: {report.total} | Parsed: {report.parsed} | Failed: {report.failed}",
    ]
    console.print(Panel("\n".join(header), expand=False))

    if not report.failed:
        console.print(Panel("Every line parsed.", title="FOOTER", expand=False))
        return

    console.print(Panel(format_counts(report.by_kind), title="FAILURES BY KIND", expand=False))

    for kind, _count in report.by_kind:
        body = []
        for s in report.samples.get(kind, ()):
            body.append(f"line {s.line_no}: {escape(s.error.message)}")
            body.append(f"  {escape(s.line)}")
        console.print(Panel("\n".join(body) or "-", title=f"SAMPLES — {kind}", expand=False))

    footer = "Failed lines are counted in total entries but skipped by the summary."
    console.print(Panel(footer, title="FOOTER", expand=False))
