# src/famtext/identity/uuid_factory.py
from __future__ import annotations

import uuid


def new_person_id() -> str:
    """
    Fresh identifier for an imported person: an uppercase, hyphenated
    UUID4 string (e.g. ``"3F2504E0-4F89-41D3-9A0C-0305E82C3301"``).

    Ids are random per import call; importing the same text twice
    yields different ids.
    """
    return str(uuid.uuid4()).upper()


__all__ = ["new_person_id"]
