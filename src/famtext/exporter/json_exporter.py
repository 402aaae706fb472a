"""
json_exporter.py
Tree document construction and JSON (de)serialization.

The document is a JSON array of person objects in encounter order:

    {"id", "name", "level", "parents", "spouses", "siblings", "children",
     "imageName", "isImplicit"}

Relationship lists only ever name people that also appear in the array.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from famtext.identity import new_person_id
from famtext.logging import get_logger
from famtext.postprocess.leveling import LevelMap
from famtext.registry.entities import PersonRegistry

log = get_logger("json_exporter")


@dataclass(slots=True)
class OutputPerson:
    id: str
    name: str
    level: int
    parents: List[str] = field(default_factory=list)
    spouses: List[str] = field(default_factory=list)
    siblings: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    image_name: str = ""
    is_implicit: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "parents": list(self.parents),
            "spouses": list(self.spouses),
            "siblings": list(self.siblings),
            "children": list(self.children),
            "imageName": self.image_name,
            "isImplicit": self.is_implicit,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutputPerson":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            level=int(data.get("level") or 0),
            parents=list(data.get("parents") or []),
            spouses=list(data.get("spouses") or []),
            siblings=list(data.get("siblings") or []),
            children=list(data.get("children") or []),
            image_name=str(data.get("imageName") or ""),
            is_implicit=bool(data.get("isImplicit", False)),
        )


def _only_known(registry: PersonRegistry, names: List[str]) -> List[str]:
    """
    Keep names of known people, rendered with their display spelling.
    """
    out: List[str] = []
    for key in registry.known(names):
        display = registry.people[key].name
        if display not in out:
            out.append(display)
    return out


def build_document(registry: PersonRegistry, levels: LevelMap) -> List[OutputPerson]:
    """
    Turn a leveled registry into output people, one per known person.
    """
    people: List[OutputPerson] = []
    for key, record in registry.people.items():
        people.append(
            OutputPerson(
                id=new_person_id(),
                name=record.name,
                level=levels.get(key, 0),
                parents=_only_known(registry, record.parents),
                spouses=_only_known(registry, record.spouses),
                siblings=_only_known(registry, record.siblings),
                children=_only_known(registry, record.children),
            )
        )
    return people


def serialize_document(people: List[OutputPerson], indent: Optional[int] = None) -> str:
    payload = [p.to_dict() for p in people]
    if indent is None:
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def load_document(payload: str) -> List[OutputPerson]:
    """
    Parse a tree document back into OutputPerson objects.

    Raises ValueError when the payload is not a JSON array of objects.
    """
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError("Tree document must be a JSON array")

    people: List[OutputPerson] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Tree document entry {idx} is not an object")
        try:
            people.append(OutputPerson.from_dict(item))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Tree document entry {idx} is malformed: {exc}") from exc

    log.debug("Loaded tree document with %d person(s)", len(people))
    return people
