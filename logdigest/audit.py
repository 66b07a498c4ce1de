from __future__ import annotations

from collections import Counter, defaultdict
from typing import Iterable

from .models import AuditReport, AuditSample, ParseError
from .parse import parse_record


def audit_lines(lines: Iterable[str], sample_per_kind: int = 5) -> AuditReport:
    """
    Collect lines that do not parse as records.
    Groups them by error kind so the failing shapes can be inspected.
    """
    total = 0
    counts: Counter[str] = Counter()
    samples: dict[str, list[AuditSample]] = defaultdict(list)

    for line_no, line in enumerate(lines, 1):
        total += 1
        result = parse_record(line)
        if not isinstance(result, ParseError):
            continue

        kind = result.kind.value
        counts[kind] += 1
        if len(samples[kind]) < sample_per_kind:
            samples[kind].append(AuditSample(line_no=line_no, line=line, error=result))

    failed = sum(counts.values())
    by_kind = counts.most_common()

    return AuditReport(
        total=total,
        parsed=total - failed,
        failed=failed,
        by_kind=tuple(by_kind),
        samples={kind: tuple(samples[kind]) for kind, _ in by_kind},
    )
