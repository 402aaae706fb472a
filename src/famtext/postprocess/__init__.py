"""
Post-registry passes.

Currently only generation leveling lives here.
"""

from __future__ import annotations

from .leveling import (
    UNRESOLVED,
    LevelMap,
    LevelResult,
    compute_levels,
    solve_levels,
)

__all__ = [
    "UNRESOLVED",
    "LevelMap",
    "LevelResult",
    "compute_levels",
    "solve_levels",
]
