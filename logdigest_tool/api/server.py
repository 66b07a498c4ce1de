from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi import HTTPException

from logdigest_tool.core.config import get_log_path
from logdigest_tool.core.runner import run_command
from logdigest_tool.core.response import ErrorItem, build_response

app = FastAPI(title="Log Digest API")


def _format_validation_details(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", []))
        msg = err.get("msg", "Invalid input")
        parts.append(f"{loc}: {msg}")
    return "; ".join(parts) or "Validation error"


def _api_error(request: Request, code: str, message: str, hint: str, details: str | None = None, status: int = 400):
    params = {
        "path": request.url.path,
        "method": request.method,
        "query": dict(request.query_params),
    }
    payload = build_response(
        command="api",
        params=params,
        data=None,
        warnings=[],
        ok=False,
        error=ErrorItem(code=code, message=message, hint=hint, details=details),
    )
    return JSONResponse(payload, status_code=status)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = _format_validation_details(exc)
    return _api_error(request, "VALIDATION", "Validation error.", "Check required fields and retry.", details, status=422)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    code = "VALIDATION" if exc.status_code == 422 else "INTERNAL"
    return _api_error(request, code, "Request failed.", "Check inputs and retry.", str(exc.detail), status=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    return _api_error(request, "INTERNAL", "Unexpected server error.", "Check server logs and retry.", str(exc), status=500)


def _checked_path(path: Optional[str]) -> Optional[str]:
    """Only the configured log or a *.log file may be read through the API."""
    if not path or not path.strip():
        return None
    p = Path(path.strip())
    if p.suffix == ".log" or p.resolve() == get_log_path().resolve():
        return path.strip()
    raise HTTPException(status_code=422, detail="path must be the configured log or a .log file.")


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/summary")
async def summary_get(path: Optional[str] = None, top: Optional[int] = None):
    return run_command("summary", {"path": _checked_path(path), "top": top})


@app.post("/summary")
async def summary_post(payload: dict = Body(default_factory=dict)):
    lines = payload.get("lines")
    if not isinstance(lines, list):
        raise HTTPException(status_code=422, detail="Body must contain a 'lines' list.")
    return run_command("summary", {"lines": lines, "top": payload.get("top")})


@app.post("/parse")
async def parse_post(payload: dict = Body(default_factory=dict)):
    return run_command("parse", {"line": payload.get("line")})


@app.get("/audit")
async def audit_get(path: Optional[str] = None, samples: int = 5):
    return run_command("audit", {"path": _checked_path(path), "samples": samples})
