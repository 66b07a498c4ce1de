from __future__ import annotations

from typing import Any, Iterable

from logdigest.aggregate import FrequencyAggregator
from logdigest.audit import audit_lines
from logdigest.ingest import read_lines
from logdigest.models import ParseError
from logdigest.parse import parse_record
from .serialize import to_dict


def lines(path: str, limit: int | None = None, offset: int = 0) -> dict[str, Any]:
    out: list[str] = []
    total = 0
    for line in read_lines(path):
        if total >= offset and (limit is None or len(out) < limit):
            out.append(line)
        total += 1
    return {"path": path, "lines": out, "total": total, "offset": offset, "returned_count": len(out)}


def summary(source: Iterable[str], top_n: int) -> dict[str, Any]:
    aggregator = FrequencyAggregator(top_n=top_n, track_errors=True)
    result = aggregator.observe_all(source).finalize()
    data = to_dict(result)
    data["failed"] = aggregator.failed
    return data


def parse(line: str) -> dict[str, Any]:
    result = parse_record(line)
    if isinstance(result, ParseError):
        return {"line": line, "parsed": False, "record": None, "error": to_dict(result)}
    return {"line": line, "parsed": True, "record": to_dict(result), "error": None}


def audit(source: Iterable[str], sample_per_kind: int) -> dict[str, Any]:
    report = audit_lines(source, sample_per_kind=sample_per_kind)
    return to_dict(report)
