from __future__ import annotations

from .names import name_key
from .uuid_factory import new_person_id

__all__ = [
    "name_key",
    "new_person_id",
]
