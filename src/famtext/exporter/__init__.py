"""
Exporter package.

Re-exports the tree document builder and JSON helpers.
"""

from __future__ import annotations

from .json_exporter import (
    OutputPerson,
    build_document,
    load_document,
    serialize_document,
)

__all__ = [
    "OutputPerson",
    "build_document",
    "load_document",
    "serialize_document",
]
