# tests/test_json_exporter.py

from __future__ import annotations

import json
import re

import pytest

from famtext.exporter import OutputPerson, build_document, load_document, serialize_document
from famtext.loader import parse_text
from famtext.postprocess import compute_levels
from famtext.registry import build_registry

UUID_UPPER = re.compile(r"^[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}$")


def _document(text: str):
    registry = build_registry(parse_text(text))
    return build_document(registry, compute_levels(registry))


def test_relationships_filtered_to_known_people() -> None:
    people = _document("NAME: Bob; CHILDREN: Alice, Nobody\nNAME: Alice; PARENTS: bob, Zed; SPOUSES: Ghost")
    bob, alice = people

    assert bob.children == ["Alice"]
    assert alice.parents == ["Bob"]
    assert alice.spouses == []
    assert alice.level == 1


def test_children_are_not_inferred_from_parents() -> None:
    bob, _ = _document("NAME: Bob\nNAME: Alice; PARENTS: Bob")
    assert bob.children == []


def test_ids_are_uppercase_uuids_and_unique() -> None:
    people = _document("NAME: A\nNAME: B\nNAME: C")
    ids = [p.id for p in people]

    assert all(UUID_UPPER.match(i) for i in ids)
    assert len(set(ids)) == 3


def test_output_order_follows_first_mention() -> None:
    people = _document("NAME: Zoe\nNAME: Adam\nNAME: zoe; PARENTS: Adam")
    assert [p.name for p in people] == ["Zoe", "Adam"]


def test_serialized_shape() -> None:
    person = OutputPerson(id="ID-1", name="Ana", level=0, spouses=["Bo"])
    payload = json.loads(serialize_document([person]))

    assert payload == [
        {
            "id": "ID-1",
            "name": "Ana",
            "level": 0,
            "parents": [],
            "spouses": ["Bo"],
            "siblings": [],
            "children": [],
            "imageName": "",
            "isImplicit": False,
        }
    ]


def test_serialize_compact_and_pretty() -> None:
    person = OutputPerson(id="ID-1", name="Zoë", level=0)

    compact = serialize_document([person])
    assert ", " not in compact
    assert "Zoë" in compact

    pretty = serialize_document([person], indent=2)
    assert "\n" in pretty


def test_load_document_reads_exported_tree() -> None:
    people = _document("NAME: Bob\nNAME: Alice; PARENTS: Bob; SIBLINGS: Cy\nNAME: Cy")
    loaded = load_document(serialize_document(people))

    assert [(p.name, p.level, p.parents) for p in loaded] == [(p.name, p.level, p.parents) for p in people]
    assert loaded[1].siblings == ["Cy"]


def test_load_document_fills_defaults() -> None:
    (person,) = load_document('[{"id": "X", "name": "Solo"}]')
    assert person.level == 0
    assert person.children == []
    assert person.image_name == ""
    assert person.is_implicit is False


def test_load_document_rejects_non_array() -> None:
    with pytest.raises(ValueError):
        load_document('{"name": "Solo"}')
    with pytest.raises(ValueError):
        load_document('["Solo"]')


def test_load_document_rejects_malformed_fields() -> None:
    with pytest.raises(ValueError, match="entry 0 is malformed"):
        load_document('[{"id": "X", "name": "Solo", "level": [1]}]')
    with pytest.raises(ValueError, match="entry 1 is malformed"):
        load_document('[{"name": "Ok"}, {"name": "Bad", "parents": 3}]')
