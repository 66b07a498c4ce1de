from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ParseErrorKind(str, Enum):
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_MONTH = "INVALID_MONTH"
    INVALID_DAY = "INVALID_DAY"
    INVALID_TIME = "INVALID_TIME"
    INVALID_PROCESS = "INVALID_PROCESS"


@dataclass(frozen=True)
class Record:
    month: str
    day: str
    time: str
    hostname: str
    process: str
    pid: str
    message: str


@dataclass(frozen=True)
class ParseError:
    kind: ParseErrorKind
    field: str
    token: str | None = None

    @property
    def message(self) -> str:
        if self.kind is ParseErrorKind.MISSING_FIELD:
            return f"No {self.field} found"
        return f"Invalid {self.field}: {self.token}"


@dataclass(frozen=True)
class Summary:
    total_entries: int
    by_process: tuple[tuple[str, int], ...]
    by_hostname: tuple[tuple[str, int], ...]
    most_frequent_process: str
    most_frequent_hostname: str
    top_keywords: tuple[str, ...]
    by_keyword: tuple[tuple[str, int], ...] = ()
    parse_errors: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class AuditSample:
    line_no: int
    line: str
    error: ParseError


@dataclass(frozen=True)
class AuditReport:
    total: int
    parsed: int
    failed: int
    by_kind: tuple[tuple[str, int], ...]
    samples: dict[str, tuple[AuditSample, ...]]
