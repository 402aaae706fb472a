from __future__ import annotations

from .build_registry import build_registry
from .entities import PersonRecord, PersonRegistry, union_names

__all__ = [
    "PersonRecord",
    "PersonRegistry",
    "build_registry",
    "union_names",
]
