from __future__ import annotations

from pathlib import Path

import pytest

from logdigest.aggregate import summarize
from logdigest.ingest import read_lines, split_lines
from logdigest_tool.core.config import DEFAULT_TOP_N, get_log_path, get_top_n


def test_log_path_default():
    path = get_log_path()
    assert path.name == "Mac_2k.log"
    assert path.parent.name == "data"


def test_log_path_from_env(sample_log, monkeypatch):
    monkeypatch.setenv("LOGDIGEST_LOG", str(sample_log))
    assert get_log_path() == Path(sample_log).resolve()


@pytest.mark.parametrize("raw,expected", [(None, DEFAULT_TOP_N), ("5", 5), ("0", DEFAULT_TOP_N), ("abc", DEFAULT_TOP_N)])
def test_top_n(raw, expected, monkeypatch):
    if raw is not None:
        monkeypatch.setenv("LOGDIGEST_TOP_N", raw)
    assert get_top_n() == expected


def test_read_lines_strips_terminators(tmp_path):
    p = tmp_path / "crlf.log"
    p.write_bytes(b"first\r\nsecond\n\nlast")
    assert list(read_lines(p)) == ["first", "second", "", "last"]


def test_read_lines_ignores_bad_bytes(tmp_path):
    p = tmp_path / "bad.log"
    p.write_bytes(b"Jul 1 09:01:05 h p[1]: caf\xff\n")
    assert list(read_lines(p)) == ["Jul 1 09:01:05 h p[1]: caf"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.log")


def test_read_lines_keeps_lone_carriage_return(tmp_path):
    p = tmp_path / "cr.log"
    p.write_bytes(b"Jul 1 09:01:05 h p[1]: before\rafter\n")
    assert list(read_lines(p)) == ["Jul 1 09:01:05 h p[1]: before\rafter"]
    summary = summarize(read_lines(p))
    assert summary.total_entries == 1
    assert summary.by_process == (("p", 1),)


def test_read_lines_only_newline_ends_a_line(tmp_path):
    p = tmp_path / "breaks.log"
    p.write_bytes("one\x0btwo\x0cthree\x1dfour\u2028five\r\r\nsix\n".encode("utf-8"))
    assert list(read_lines(p)) == ["one\x0btwo\x0cthree\x1dfour\u2028five\r", "six"]


def test_split_lines():
    assert split_lines("") == []
    assert split_lines("a\r\nb\n") == ["a", "b"]
    assert split_lines("a\rb\n\nc") == ["a\rb", "", "c"]
    assert split_lines("a\x85b\u2028c") == ["a\x85b\u2028c"]
