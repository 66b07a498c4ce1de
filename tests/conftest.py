from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    monkeypatch.delenv("LOGDIGEST_LOG", raising=False)
    monkeypatch.delenv("LOGDIGEST_TOP_N", raising=False)


@pytest.fixture
def sample_log():
    return FIXTURE_DIR / "mac_sample.log"


@pytest.fixture
def configured_log(sample_log, monkeypatch):
    monkeypatch.setenv("LOGDIGEST_LOG", str(sample_log))
    return sample_log
