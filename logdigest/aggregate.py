from __future__ import annotations

from collections import Counter
from typing import Iterable

from .models import ParseError, Record, Summary
from .parse import parse_record, split_fields
from .stopwords import STOPWORDS

DEFAULT_TOP_N = 3


def clean_keyword(token: str) -> str:
    return token.lower().replace(":", "")


def top_counts(counter: Counter[str], limit: int) -> list[tuple[str, int]]:
    """
    Highest counts first. Counter.most_common sorts stably, so equal counts
    keep first-seen order.
    """
    return counter.most_common(limit)


class FrequencyAggregator:
    """
    Accumulates process, hostname and keyword counts over raw log lines.

    Lines that fail to parse only bump total_entries. The aggregator can be
    finalized at any point; finalize() does not reset it.
    """

    def __init__(
        self,
        stopwords: frozenset[str] = STOPWORDS,
        top_n: int = DEFAULT_TOP_N,
        track_errors: bool = False,
    ):
        self.stopwords = stopwords
        self.top_n = top_n
        self.track_errors = track_errors

        self.total_entries = 0
        self.processes: Counter[str] = Counter()
        self.hostnames: Counter[str] = Counter()
        self.keywords: Counter[str] = Counter()
        self.errors: Counter[str] = Counter()

    # ---------- Write API ----------

    def observe(self, line: str) -> Record | ParseError:
        self.total_entries += 1

        result = parse_record(line)
        if isinstance(result, ParseError):
            if self.track_errors:
                self.errors[result.kind.value] += 1
            return result

        self.processes[result.process] += 1
        self.hostnames[result.hostname] += 1
        for token in split_fields(result.message):
            if token not in self.stopwords:
                self.keywords[token] += 1

        return result

    def observe_all(self, lines: Iterable[str]) -> "FrequencyAggregator":
        for line in lines:
            self.observe(line)
        return self

    def merge(self, other: "FrequencyAggregator") -> "FrequencyAggregator":
        """Fold a partial aggregate (e.g. from another worker) into this one."""
        self.total_entries += other.total_entries
        self.processes.update(other.processes)
        self.hostnames.update(other.hostnames)
        self.keywords.update(other.keywords)
        self.errors.update(other.errors)
        return self

    # ---------- Read API ----------

    def finalize(self) -> Summary:
        by_process = top_counts(self.processes, self.top_n)
        by_hostname = top_counts(self.hostnames, self.top_n)
        by_keyword = [
            (clean_keyword(token), count)
            for token, count in top_counts(self.keywords, self.top_n)
        ]

        return Summary(
            total_entries=self.total_entries,
            by_process=tuple(by_process),
            by_hostname=tuple(by_hostname),
            most_frequent_process=by_process[0][0] if by_process else "",
            most_frequent_hostname=by_hostname[0][0] if by_hostname else "",
            top_keywords=tuple(k for k, _ in by_keyword),
            by_keyword=tuple(by_keyword),
            parse_errors=dict(self.errors),
        )

    @property
    def failed(self) -> int:
        return self.total_entries - sum(self.processes.values())


def summarize(
    lines: Iterable[str],
    stopwords: frozenset[str] = STOPWORDS,
    top_n: int = DEFAULT_TOP_N,
    track_errors: bool = False,
) -> Summary:
    aggregator = FrequencyAggregator(stopwords=stopwords, top_n=top_n, track_errors=track_errors)
    return aggregator.observe_all(lines).finalize()
