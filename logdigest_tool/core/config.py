from __future__ import annotations

import os
from pathlib import Path

DEFAULT_TOP_N = 3


def get_log_path() -> Path:
    env_path = os.environ.get("LOGDIGEST_LOG")
    if env_path:
        return Path(env_path).expanduser().resolve()
    base_dir = Path(__file__).resolve().parents[2]
    return base_dir / "data" / "Mac_2k.log"


def get_top_n() -> int:
    raw = os.environ.get("LOGDIGEST_TOP_N")
    if not raw:
        return DEFAULT_TOP_N
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_TOP_N
    return value if value > 0 else DEFAULT_TOP_N
