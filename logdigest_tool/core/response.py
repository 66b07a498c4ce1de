from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any

from .config import get_log_path


@dataclass(frozen=True)
class WarningItem:
    code: str
    message: str
    count: int
    # Per-kind breakdown, e.g. [{"kind": "INVALID_DAY", "count": 2}].
    items: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class ErrorItem:
    code: str
    message: str
    hint: str
    details: str | None = None


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_failure_warning(failed: int, by_kind: dict[str, int]) -> WarningItem:
    items = [
        {"kind": kind, "count": count}
        for kind, count in sorted(by_kind.items(), key=lambda kv: (-kv[1], kv[0]))
    ]
    return WarningItem(
        code="PARSE_FAILURES",
        message=f"Lines that failed to parse: {failed}",
        count=failed,
        items=items,
    )


def build_response(
    command: str,
    params: dict[str, Any],
    data: Any,
    warnings: list[WarningItem] | None = None,
    ok: bool = True,
    error: ErrorItem | None = None,
    log_path: str | None = None,
) -> dict[str, Any]:
    """
    Every command answers with the same envelope:
    ok / command / params / warnings / data / error / meta.

    meta.log_path is the file the command read, or the configured log when
    the command read no file.
    """
    return {
        "ok": ok,
        "command": command,
        "params": params,
        "warnings": [asdict(w) for w in warnings or []],
        "data": data,
        "error": asdict(error) if error else None,
        "meta": {
            "log_path": log_path or str(get_log_path()),
            "generated_at": _now_iso(),
        },
    }


def build_error(
    command: str,
    params: dict[str, Any],
    message: str,
    code: str = "INTERNAL",
    hint: str = "Check logs or retry.",
    details: str | None = None,
) -> dict[str, Any]:
    warn = WarningItem(code=code, message=message, count=1)
    err = ErrorItem(code=code, message=message, hint=hint, details=details)
    return build_response(command, params, data=None, warnings=[warn], ok=False, error=err)
