# tests/test_registry.py

from __future__ import annotations

from itertools import permutations

from famtext.loader import parse_line, parse_text
from famtext.registry import PersonRecord, PersonRegistry, build_registry, union_names


def _lower_sets(record: PersonRecord):
    return (
        {n.lower() for n in record.parents},
        {n.lower() for n in record.spouses},
        {n.lower() for n in record.siblings},
        {n.lower() for n in record.children},
    )


def test_union_names_is_case_insensitive_and_keeps_first_spelling() -> None:
    assert union_names(["Bob", "carol"], ["BOB", "Carol", " Dan "]) == ["Bob", "carol", "Dan"]


def test_fresh_record_dedupes_its_own_lists() -> None:
    reg = PersonRegistry()
    record = reg.register(parse_line("NAME: Alice; PARENTS: Bob, bob"))
    assert record.parents == ["Bob"]
    assert record.mentions == 1


def test_repeated_name_merges_into_first_record() -> None:
    reg = build_registry(
        parse_text("NAME: Alice; PARENTS: X\nNAME: alice; CHILDREN: Y\nNAME: ALICE; PARENTS: x")
    )

    assert len(reg) == 1
    alice = reg.get("aLiCe")
    assert alice.name == "Alice"
    assert alice.parents == ["X"]
    assert alice.children == ["Y"]
    assert alice.mentions == 3
    assert alice.lineno == 1


def test_merge_is_idempotent() -> None:
    line = parse_line("NAME: Alice; SPOUSES: Dan; SIBLINGS: Eve")
    reg = PersonRegistry()
    reg.register(line)
    before = _lower_sets(reg.get("Alice"))
    reg.register(line)
    assert _lower_sets(reg.get("Alice")) == before


def test_merge_is_order_independent() -> None:
    lines = [
        "NAME: Alice; PARENTS: Bob",
        "NAME: alice; SPOUSES: Dan; PARENTS: carol",
        "NAME: ALICE; CHILDREN: Fay; PARENTS: BOB",
    ]
    results = set()
    for order in permutations(lines):
        reg = build_registry(parse_text("\n".join(order)))
        alice = reg.get("alice")
        results.add(tuple(frozenset(s) for s in _lower_sets(alice)))

    assert len(results) == 1


def test_known_lookup_is_case_insensitive() -> None:
    reg = build_registry(parse_text("NAME: Bob\nNAME: Alice; PARENTS: BOB, Zed"))

    assert reg.is_known(" bob ")
    assert not reg.is_known("Zed")
    assert reg.known(reg.get("Alice").parents) == ["bob"]
    assert [p.name for p in reg] == ["Bob", "Alice"]
