# src/famtext/identity/names.py
from __future__ import annotations

from typing import Optional


def name_key(name: Optional[str]) -> str:
    """
    Identity key for a person name.

    Names compare case-insensitively after trimming; the display form is
    stored separately by the registry.
    """
    if name is None:
        return ""
    return name.strip().casefold()

