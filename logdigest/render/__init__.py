from .summary import render_summary
from .lines import render_lines
from .record import render_record
from .audit import render_audit

__all__ = [
    "render_summary",
    "render_lines",
    "render_record",
    "render_audit",
]
