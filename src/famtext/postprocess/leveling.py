"""
leveling.py
Generation ("level") assignment for an imported person registry.

Levels are computed in four passes over the registry:

1. Relaxation: level = 1 + max(resolved parent levels), repeated until a
   round changes nothing or the round cap is hit. People whose known
   parents are all still unresolved wait for a later round.
2. Default: anyone left unresolved (isolated, or stuck in a parent cycle)
   lands on level 0.
3. Sibling promotion: a level-0 person with a known sibling (declared by
   either side) moves to 1.
4. Spouse sync: spouses are raised to the deeper of their two levels,
   repeated until stable or the round cap is hit.

Only known people (those with their own NAME line) take part; references
to anyone else are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from famtext.config import DEFAULT_MAX_ROUNDS
from famtext.logging import get_logger
from famtext.registry.entities import PersonRegistry

log = get_logger("leveling")

UNRESOLVED = -1

LevelMap = Dict[str, int]


@dataclass
class LevelResult:
    """Final levels keyed by name key, plus what each pass did."""
    levels: LevelMap = field(default_factory=dict)
    relaxation_rounds: int = 0
    spouse_rounds: int = 0
    defaulted: List[str] = field(default_factory=list)
    promoted: List[str] = field(default_factory=list)

    @property
    def generations(self) -> int:
        return (max(self.levels.values()) + 1) if self.levels else 0


# ----------------------------------------------------------------------
# Passes
# ----------------------------------------------------------------------

def _relax_parent_levels(registry: PersonRegistry, levels: LevelMap, max_rounds: int) -> int:
    rounds = 0
    for _ in range(max_rounds):
        rounds += 1
        changed = False

        for key, person in registry.people.items():
            parent_keys = registry.known(person.parents)
            if not parent_keys:
                new_level = 0
            else:
                resolved = [levels[p] for p in parent_keys if levels[p] != UNRESOLVED]
                if not resolved:
                    continue
                new_level = max(resolved) + 1

            if levels[key] != new_level:
                levels[key] = new_level
                changed = True

        if not changed:
            break
    else:
        log.warning("Level relaxation hit the %d round cap; parent graph may be cyclic", max_rounds)

    return rounds


def _default_unresolved(levels: LevelMap) -> List[str]:
    defaulted = [key for key, level in levels.items() if level == UNRESOLVED]
    for key in defaulted:
        levels[key] = 0
    return defaulted


def _promote_siblings(registry: PersonRegistry, levels: LevelMap) -> List[str]:
    # Sibling ties count from either side of the declaration.
    with_siblings = set()
    for key, person in registry.people.items():
        sibling_keys = registry.known(person.siblings)
        if sibling_keys:
            with_siblings.add(key)
            with_siblings.update(sibling_keys)

    promoted = []
    for key in registry.people:
        if key in with_siblings and levels[key] == 0:
            levels[key] = 1
            promoted.append(key)
    return promoted


def _sync_spouses(registry: PersonRegistry, levels: LevelMap, max_rounds: int) -> int:
    rounds = 0
    for _ in range(max_rounds):
        rounds += 1
        changed = False

        for key, person in registry.people.items():
            for spouse_key in registry.known(person.spouses):
                new_level = max(levels[key], levels[spouse_key])
                if levels[key] != new_level:
                    levels[key] = new_level
                    changed = True
                if levels[spouse_key] != new_level:
                    levels[spouse_key] = new_level
                    changed = True

        if not changed:
            break
    else:
        log.warning("Spouse sync hit the %d round cap", max_rounds)

    return rounds


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def solve_levels(registry: PersonRegistry, max_rounds: int = DEFAULT_MAX_ROUNDS) -> LevelResult:
    """
    Assign every known person a non-negative generation number.

    Parent cycles are not rejected: their members fall back to level 0
    (or climb until ``max_rounds`` when hanging off a resolved root).
    """
    if max_rounds < 1:
        raise ValueError(f"max_rounds must be >= 1, got {max_rounds}")

    levels: LevelMap = {key: UNRESOLVED for key in registry.people}
    result = LevelResult(levels=levels)

    result.relaxation_rounds = _relax_parent_levels(registry, levels, max_rounds)
    result.defaulted = _default_unresolved(levels)
    result.promoted = _promote_siblings(registry, levels)
    result.spouse_rounds = _sync_spouses(registry, levels, max_rounds)

    for key in result.defaulted:
        log.debug("No resolvable parents for %r; defaulted to level 0", registry.people[key].name)
    for key in result.promoted:
        log.debug("Promoted %r to level 1 (has a known sibling)", registry.people[key].name)

    log.info(
        "Levels solved: people=%d generations=%d relaxation_rounds=%d spouse_rounds=%d",
        len(levels),
        result.generations,
        result.relaxation_rounds,
        result.spouse_rounds,
    )
    return result


def compute_levels(registry: PersonRegistry, max_rounds: int = DEFAULT_MAX_ROUNDS) -> LevelMap:
    return solve_levels(registry, max_rounds=max_rounds).levels
