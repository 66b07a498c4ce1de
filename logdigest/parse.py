from __future__ import annotations

import re

from .models import ParseError, ParseErrorKind, Record

# -------------------------
# Field rules
# -------------------------

MONTHS = frozenset(
    {"jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"}
)

# Same shape an unsigned integer parse accepts: ASCII digits, optional leading "+".
RE_UINT = re.compile(r"\+?[0-9]+")

PID_SUFFIX = "]:"

# Unicode whitespace runs. \x1c-\x1f stay inside tokens, unlike str.split().
RE_FIELD_SEP = re.compile(r"[^\S\x1c-\x1f]+")


def split_fields(text: str) -> list[str]:
    return [t for t in RE_FIELD_SEP.split(text) if t]


def _parse_uint(value: str) -> int | None:
    if not RE_UINT.fullmatch(value):
        return None
    return int(value)


def _missing(field: str) -> ParseError:
    return ParseError(ParseErrorKind.MISSING_FIELD, field)


# -------------------------
# Single-field parsers
# -------------------------

def parse_month(token: str) -> str | ParseError:
    """Validate a month abbreviation case-insensitively; keep the original casing."""
    if token.lower() in MONTHS:
        return token
    return ParseError(ParseErrorKind.INVALID_MONTH, "month", token)


def parse_day(token: str) -> str | ParseError:
    """Return the canonical decimal form of a day in 1..31 ("07" -> "7")."""
    day = _parse_uint(token)
    if day is None or not 1 <= day <= 31:
        return ParseError(ParseErrorKind.INVALID_DAY, "day", token)
    return str(day)


def parse_time(token: str) -> str | ParseError:
    """
    Validate HH:MM:SS.

    Only the shape is checked: three colon-separated parts of exactly two
    characters, each an unsigned integer. "99:99:99" is accepted.
    """
    parts = token.split(":")
    if len(parts) != 3:
        return ParseError(ParseErrorKind.INVALID_TIME, "time", token)
    for part in parts:
        if len(part) != 2 or _parse_uint(part) is None:
            return ParseError(ParseErrorKind.INVALID_TIME, "time", token)
    return ":".join(parts)


def parse_process_and_pid(token: str) -> tuple[str, str] | ParseError:
    """
    Split "name[pid]:" into (name, pid).

    Exactly one "[" is required. A missing "]:" suffix is not an error: the pid
    comes back empty ("proc[43" -> ("proc", "")).
    """
    parts = token.split("[")
    if len(parts) != 2:
        return ParseError(ParseErrorKind.INVALID_PROCESS, "process", token)
    process, rest = parts
    pid = rest[: -len(PID_SUFFIX)] if rest.endswith(PID_SUFFIX) else ""
    return process, pid


# -------------------------
# Record parser
# -------------------------

def parse_record(line: str) -> Record | ParseError:
    """
    Parse one syslog-style line:

      Jul  1 09:01:05 host com.apple.CDScheduler[43]: Thermal pressure state: 1

    Returns a Record, or the ParseError of the first field that failed.
    Never raises.
    """
    tokens = iter(split_fields(line or ""))

    token = next(tokens, None)
    if token is None:
        return _missing("month")
    month = parse_month(token)
    if isinstance(month, ParseError):
        return month

    token = next(tokens, None)
    if token is None:
        return _missing("day")
    day = parse_day(token)
    if isinstance(day, ParseError):
        return day

    token = next(tokens, None)
    if token is None:
        return _missing("time")
    time = parse_time(token)
    if isinstance(time, ParseError):
        return time

    hostname = next(tokens, None)
    if hostname is None:
        return _missing("hostname")

    token = next(tokens, None)
    if token is None:
        return _missing("process")
    proc = parse_process_and_pid(token)
    if isinstance(proc, ParseError):
        return proc
    process, pid = proc

    message = " ".join(tokens)

    return Record(
        month=month,
        day=day,
        time=time,
        hostname=hostname,
        process=process,
        pid=pid,
        message=message,
    )
