from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from logdigest.models import ParseError


def to_dict(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, ParseError):
        return {
            "kind": value.kind.value,
            "field": value.field,
            "token": value.token,
            "message": value.message,
        }
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_dict(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {k: to_dict(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_dict(v) for v in value]
    return value
