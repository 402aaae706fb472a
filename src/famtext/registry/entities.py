from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from famtext.identity import name_key
from famtext.loader.line_parser import RELATION_FIELDS, LineRecord


def union_names(existing: Iterable[str], incoming: Iterable[str]) -> List[str]:
    """
    Case-insensitive union preserving first-seen order and spelling.
    """
    merged: List[str] = []
    seen = set()
    for name in [*existing, *incoming]:
        if not name or not name.strip():
            continue
        cleaned = name.strip()
        key = name_key(cleaned)
        if key in seen:
            continue
        seen.add(key)
        merged.append(cleaned)
    return merged


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class PersonRecord:
    """
    Accumulated facts about one named person.

    ``name`` keeps the spelling of the first NAME line; the relationship
    lists behave as case-insensitive sets and may reference people who
    never get a NAME line of their own.
    """
    name: str
    parents: List[str] = field(default_factory=list)
    spouses: List[str] = field(default_factory=list)
    siblings: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)

    lineno: Optional[int] = None
    mentions: int = 1

    @property
    def key(self) -> str:
        return name_key(self.name)

    @classmethod
    def from_line(cls, line: LineRecord) -> "PersonRecord":
        record = cls(name=line.name.strip(), lineno=line.lineno)
        for rel in RELATION_FIELDS:
            setattr(record, rel.lower(), union_names([], getattr(line, rel.lower())))
        return record

    def merge(self, line: LineRecord) -> None:
        for rel in RELATION_FIELDS:
            attr = rel.lower()
            setattr(self, attr, union_names(getattr(self, attr), getattr(line, attr)))
        self.mentions += 1


# -----------------------------
# Registry
# -----------------------------

@dataclass(slots=True)
class PersonRegistry:
    """
    In-memory person store keyed by case-insensitive name, in encounter order.
    """
    people: Dict[str, PersonRecord] = field(default_factory=dict)

    def register(self, line: LineRecord) -> PersonRecord:
        key = name_key(line.name)
        existing = self.people.get(key)
        if existing is None:
            record = PersonRecord.from_line(line)
            self.people[key] = record
            return record

        existing.merge(line)
        return existing

    def get(self, name: str) -> Optional[PersonRecord]:
        return self.people.get(name_key(name))

    def is_known(self, name: str) -> bool:
        return name_key(name) in self.people

    def known(self, names: Iterable[str]) -> List[str]:
        """Keys of the names that belong to known people, in input order."""
        return [name_key(n) for n in names if n and self.is_known(n)]

    def __len__(self) -> int:
        return len(self.people)

    def __iter__(self) -> Iterator[PersonRecord]:
        return iter(self.people.values())
