import json
import sys
from rich.console import Console
from rich.panel import Panel

from .aggregate import FrequencyAggregator
from .audit import audit_lines
from .ingest import read_lines
from .parse import parse_record
from .render import (
    render_audit,
    render_lines,
    render_record,
    render_summary,
)
from logdigest_tool.core.config import get_log_path, get_top_n
from logdigest_tool.core.response import build_error
from logdigest_tool.core.runner import run_command

console = Console()

HELP_TEXT = """Log Digest

Commands:

help
  Show this help

lines [path]
  Print the raw lines of the log file

summary [path] [top=3]
  Frequency summary: total entries, top processes, top hostnames,
  top keywords (stopwords excluded)

parse <line>
  Parse a single log line and show its fields (or why it failed)
  Example:
    parse "Jul  1 09:01:05 host1 kernel[0]: Thermal pressure state: 1"

audit [path] [samples=5]
  Lines that failed to parse, grouped by error kind

web
  Start local API server (http://127.0.0.1:8000)

Path defaults to $LOGDIGEST_LOG, then data/Mac_2k.log.
top defaults to $LOGDIGEST_TOP_N, then 3.

Options:
  --format pretty|json (default: pretty)

Examples:
  summary /var/log/system.log top=5
  summary --format json
"""


def _parse_kv_args(args: list[str]) -> dict:
    out = {}
    for a in args:
        if "=" in a:
            k, v = a.split("=", 1)
            out[k.strip()] = v.strip().strip('"')
    return out


def _positional(args: list[str]) -> list[str]:
    return [a for a in args if "=" not in a]


def _int_arg(kv: dict, key: str, default: int) -> int | None:
    if key not in kv:
        return default
    try:
        return int(kv[key])
    except ValueError:
        return None


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    output_format = "pretty"
    if "--format" in argv:
        idx = argv.index("--format")
        if idx + 1 < len(argv):
            output_format = argv[idx + 1]
            argv = argv[:idx] + argv[idx + 2 :]
    else:
        for i, arg in enumerate(list(argv)):
            if arg.startswith("--format="):
                output_format = arg.split("=", 1)[1]
                argv.pop(i)
                break

    if not argv or argv[0] in ("help", "-h", "--help"):
        console.print(Panel(HELP_TEXT.strip(), title="HELP"))
        return 0

    cmd, *args = argv

    def emit_response(payload: dict) -> int:
        print(json.dumps(payload, ensure_ascii=False))
        return 0 if payload.get("ok") else 1

    def emit_error(command: str, params: dict, message: str, code: str = "VALIDATION", hint: str = "Check usage."):
        response = build_error(command=command, params=params, message=message, code=code, hint=hint)
        print(json.dumps(response, ensure_ascii=False))
        return 1

    def open_log(path: str):
        try:
            return read_lines(path)
        except FileNotFoundError:
            console.print(f"[red]Path not found:[/red] {path}")
            return None

    kv = _parse_kv_args(args)
    pos = _positional(args)

    if cmd == "lines":
        path = pos[0] if pos else str(get_log_path())
        if output_format == "json":
            params = {"path": path}
            if "limit" in kv:
                params["limit"] = kv["limit"]
            return emit_response(run_command("lines", params))
        source = open_log(path)
        if source is None:
            return 1
        render_lines(source)
        return 0

    if cmd == "summary":
        path = pos[0] if pos else str(get_log_path())
        top = _int_arg(kv, "top", get_top_n())
        if top is None or top <= 0:
            if output_format == "json":
                return emit_error("summary", kv, "Usage: summary [path] [top=N]")
            console.print("[red]Usage:[/red] summary [path] [top=N]")
            return 1
        if output_format == "json":
            return emit_response(run_command("summary", {"path": path, "top": top}))
        source = open_log(path)
        if source is None:
            return 1
        summary = FrequencyAggregator(top_n=top).observe_all(source).finalize()
        render_summary(summary, source=path)
        return 0

    if cmd == "parse":
        if not args:
            if output_format == "json":
                return emit_error("parse", {}, "Usage: parse <line>")
            console.print("[red]Usage:[/red] parse <line>")
            return 1
        line = " ".join(args)
        if output_format == "json":
            return emit_response(run_command("parse", {"line": line}))
        render_record(line, parse_record(line))
        return 0

    if cmd == "audit":
        path = pos[0] if pos else str(get_log_path())
        samples = _int_arg(kv, "samples", 5)
        if samples is None or samples < 0:
            if output_format == "json":
                return emit_error("audit", kv, "Usage: audit [path] [samples=N]")
            console.print("[red]Usage:[/red] audit [path] [samples=N]")
            return 1
        if output_format == "json":
            return emit_response(run_command("audit", {"path": path, "samples": samples}))
        source = open_log(path)
        if source is None:
            return 1
        render_audit(audit_lines(source, sample_per_kind=samples), source=path)
        return 0

    if cmd == "web":
        if output_format == "json":
            return emit_error("web", {}, "Use `uvicorn logdigest_tool.api.server:app` to start the web server.", hint="Run the web server command directly.")
        import uvicorn

        console.print("[green]Starting web server...[/green]")
        uvicorn.run("logdigest_tool.api.server:app", host="127.0.0.1", port=8000, reload=False)
        return 0

    if output_format == "json":
        return emit_error("unknown", {"command": cmd}, f"Unknown command: {cmd}", hint="Run `help` to see commands.")
    console.print(Panel(f"Unknown command: {cmd}\n\n" + HELP_TEXT.strip(), title="ERROR"))
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
