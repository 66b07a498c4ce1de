from __future__ import annotations

from logdigest.aggregate import FrequencyAggregator, clean_keyword, summarize
from logdigest.ingest import read_lines
from logdigest.models import ParseError, Record
from logdigest.stopwords import STOPWORDS

LINES = [
    "Jul  1 09:01:05 host1 proc[43]: hello world hello",
    "Jul  2 10:00:00 host2 proc[44]: goodbye world",
]


def test_end_to_end_example():
    summary = summarize(LINES)
    assert summary.total_entries == 2
    assert summary.by_process == (("proc", 2),)
    assert summary.by_hostname == (("host1", 1), ("host2", 1))
    assert summary.most_frequent_process == "proc"
    assert summary.most_frequent_hostname == "host1"
    assert summary.top_keywords == ("hello", "world", "goodbye")
    assert summary.by_keyword == (("hello", 2), ("world", 2), ("goodbye", 1))


def test_empty_input():
    summary = FrequencyAggregator().finalize()
    assert summary.total_entries == 0
    assert summary.by_process == ()
    assert summary.by_hostname == ()
    assert summary.most_frequent_process == ""
    assert summary.most_frequent_hostname == ""
    assert summary.top_keywords == ()
    assert summary.parse_errors == {}


def test_failed_lines_only_count_toward_total():
    agg = FrequencyAggregator()
    result = agg.observe("not a log line")
    assert isinstance(result, ParseError)
    summary = agg.finalize()
    assert summary.total_entries == 1
    assert summary.by_process == ()
    assert summary.most_frequent_process == ""
    assert summary.parse_errors == {}
    assert agg.failed == 1


def test_observe_returns_record():
    agg = FrequencyAggregator()
    assert isinstance(agg.observe(LINES[0]), Record)


def test_same_line_twice_doubles_counters():
    once = FrequencyAggregator().observe_all([LINES[0], "junk"])
    twice = FrequencyAggregator().observe_all([LINES[0], LINES[0], "junk", "junk"])
    assert twice.total_entries == 2 * once.total_entries
    for name in ("processes", "hostnames", "keywords"):
        a = getattr(once, name)
        b = getattr(twice, name)
        assert set(a) == set(b)
        assert all(b[k] == 2 * a[k] for k in a)


def test_stopwords_are_case_sensitive():
    agg = FrequencyAggregator()
    agg.observe("Jul 1 09:01:05 host proc[1]: the The THE the")
    assert "the" in STOPWORDS
    assert "the" not in agg.keywords
    assert agg.keywords["The"] == 1
    assert agg.keywords["THE"] == 1


def test_keyword_cleanup_only_on_output():
    agg = FrequencyAggregator(top_n=5)
    agg.observe("Jul 1 09:01:05 host proc[1]: State: state: STATE")
    assert set(agg.keywords) == {"State:", "state:", "STATE"}
    summary = agg.finalize()
    assert summary.top_keywords == ("state", "state", "state")


def test_clean_keyword():
    assert clean_keyword("AppleThunderboltNHIType2::prePCIWake") == "applethunderboltnhitype2prepciwake"
    assert clean_keyword("Reason:") == "reason"


def test_ties_keep_first_seen_order():
    lines = [
        "Jul 1 09:01:05 zeta b[1]: x",
        "Jul 1 09:01:05 alpha a[1]: x",
        "Jul 1 09:01:05 mid c[1]: x",
        "Jul 1 09:01:05 last d[1]: x",
    ]
    summary = summarize(lines)
    assert summary.by_hostname == (("zeta", 1), ("alpha", 1), ("mid", 1))
    assert summary.by_process == (("b", 1), ("a", 1), ("c", 1))


def test_top_n_limits_lists():
    summary = summarize(LINES, top_n=1)
    assert summary.by_hostname == (("host1", 1),)
    assert summary.top_keywords == ("hello",)


def test_custom_stopwords():
    summary = summarize(LINES, stopwords=frozenset({"hello"}))
    assert summary.top_keywords == ("world", "goodbye")


def test_track_errors():
    agg = FrequencyAggregator(track_errors=True)
    agg.observe_all(["xxx 1 09:01:05 h p[1]:", "Jul 0 09:01:05 h p[1]:", "Jul 1 09:01:05 h p[1]:", ""])
    assert agg.finalize().parse_errors == {"INVALID_MONTH": 1, "INVALID_DAY": 1, "MISSING_FIELD": 1}


def test_merge_matches_single_pass():
    left = FrequencyAggregator().observe_all(LINES[:1] + ["junk"])
    right = FrequencyAggregator().observe_all(LINES[1:])
    merged = left.merge(right).finalize()
    assert merged == summarize(LINES + ["junk"])


def test_finalize_does_not_reset():
    agg = FrequencyAggregator().observe_all(LINES)
    first = agg.finalize()
    agg.observe(LINES[1])
    second = agg.finalize()
    assert first.total_entries == 2
    assert second.total_entries == 3
    assert second.by_hostname[0] == ("host2", 2)


def test_summary_from_fixture(sample_log):
    summary = summarize(read_lines(sample_log))
    assert summary.total_entries == 8
    assert summary.by_process == (
        ("kernel", 3),
        ("com.apple.CDScheduler", 1),
        ("WindowServer", 1),
    )
    assert summary.by_hostname == (("calvisitor-10-105-160-95", 3), ("authorMacBook-Pro", 2))
    assert summary.most_frequent_process == "kernel"
    assert summary.most_frequent_hostname == "calvisitor-10-105-160-95"
    assert summary.top_keywords == ("applethunderboltnhitype2prepciwake", "power", "complete")
