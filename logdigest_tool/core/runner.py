from __future__ import annotations

from typing import Any, Callable

from logdigest.ingest import read_lines, split_lines
from logdigest_tool.core import commands as core_commands
from logdigest_tool.core.config import get_log_path, get_top_n
from logdigest_tool.core.response import ErrorItem, WarningItem, build_response, parse_failure_warning


def _error(
    command: str,
    params: dict[str, Any],
    code: str,
    message: str,
    hint: str,
    details: str | None = None,
):
    return build_response(
        command=command,
        params=params,
        data=None,
        warnings=[WarningItem(code=code, message=message, count=1)],
        ok=False,
        error=ErrorItem(code=code, message=message, hint=hint, details=details),
    )


def _normalize_limit(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _normalize_optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _resolve_path(params: dict[str, Any]) -> str:
    path = params.get("path")
    return str(path).strip() if path and str(path).strip() else str(get_log_path())


def _inline_lines(params: dict[str, Any]) -> list[str] | None:
    value = params.get("lines")
    if value is None:
        return None
    if isinstance(value, str):
        return split_lines(value)
    return [str(v) for v in value]


def _run_safely(command: str, params: dict[str, Any], func: Callable[[], dict[str, Any]]):
    try:
        return func()
    except FileNotFoundError as exc:
        return _error(
            command,
            params,
            "NOT_FOUND",
            "Log file not found.",
            "Pass path=... or set LOGDIGEST_LOG.",
            details=str(exc),
        )
    except Exception as exc:  # pragma: no cover - safety net
        return _error(command, params, "INTERNAL", "Command failed.", "Check inputs and retry.", details=str(exc))


def run_command(command: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
    params = params or {}
    cmd = (command or "").strip().lower()

    def _execute() -> dict[str, Any]:
        if cmd == "lines":
            path = _resolve_path(params)
            limit = _normalize_optional_int(params.get("limit"))
            offset = max(_normalize_limit(params.get("offset"), 0), 0)
            if limit is not None and limit < 0:
                return _error("lines", params, "VALIDATION", "Invalid limit.", "Use a non-negative limit.")
            data = core_commands.lines(path, limit=limit, offset=offset)
            return build_response("lines", {"path": path, "limit": limit, "offset": offset}, data, log_path=path)

        if cmd == "summary":
            top = _normalize_limit(params.get("top"), get_top_n())
            if top <= 0:
                return _error("summary", params, "VALIDATION", "Invalid top.", "Use top=1 or more.")
            inline = _inline_lines(params)
            if inline is not None:
                source, out_params = inline, {"lines": len(inline), "top": top}
            else:
                path = _resolve_path(params)
                source, out_params = read_lines(path), {"path": path, "top": top}
            data = core_commands.summary(source, top_n=top)
            warnings = []
            if data["failed"]:
                warnings.append(parse_failure_warning(data["failed"], data["parse_errors"]))
            return build_response("summary", out_params, data, warnings=warnings, log_path=out_params.get("path"))

        if cmd == "parse":
            line = params.get("line")
            if line is None:
                return _error("parse", params, "VALIDATION", "Missing line.", "Provide a log line to parse.")
            data = core_commands.parse(str(line))
            return build_response("parse", {"line": str(line)}, data)

        if cmd == "audit":
            samples = _normalize_limit(params.get("samples"), 5)
            if samples < 0:
                return _error("audit", params, "VALIDATION", "Invalid samples.", "Use samples=0 or more.")
            inline = _inline_lines(params)
            if inline is not None:
                source, out_params = inline, {"lines": len(inline), "samples": samples}
            else:
                path = _resolve_path(params)
                source, out_params = read_lines(path), {"path": path, "samples": samples}
            data = core_commands.audit(source, sample_per_kind=samples)
            return build_response("audit", out_params, data, log_path=out_params.get("path"))

        return _error("unknown", params, "VALIDATION", f"Unknown command: {command}", "Check --help for commands.")

    return _run_safely(cmd, params, _execute)
