# src/famtext/loader/__init__.py

"""
Public interface for the text loader.

    from famtext.loader import LineRecord, parse_line, parse_text, iter_lines
"""

from __future__ import annotations

from .line_parser import (
    FIELD_PATTERN,
    RELATION_FIELDS,
    LineRecord,
    iter_lines,
    parse_line,
    parse_text,
    split_names,
)

__all__ = [
    "FIELD_PATTERN",
    "RELATION_FIELDS",
    "LineRecord",
    "iter_lines",
    "parse_line",
    "parse_text",
    "split_names",
]
