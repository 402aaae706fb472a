# src/famtext/loader/line_parser.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

RELATION_FIELDS: Tuple[str, ...] = ("PARENTS", "SPOUSES", "SIBLINGS", "CHILDREN")

FIELD_PATTERN = re.compile(
    r"\b(NAME|PARENTS|SPOUSES|SIBLINGS|CHILDREN)\s*:\s*([^;]*)",
    re.IGNORECASE,
)

_LINE_BREAK = re.compile(r"\r\n|[\r\n]")


@dataclass(frozen=True)
class LineRecord:
    """
    One person mention parsed from a single input line.

    Attributes:
        lineno: 1-based line number in the original text (0 if unknown).
        name: The trimmed NAME value.
        parents / spouses / siblings / children: Trimmed, non-empty name
            tokens from the matching comma-separated field.
        raw: The trimmed source line.
    """
    lineno: int
    name: str
    parents: Tuple[str, ...] = ()
    spouses: Tuple[str, ...] = ()
    siblings: Tuple[str, ...] = ()
    children: Tuple[str, ...] = ()
    raw: str = ""


def split_names(value: str) -> List[str]:
    """Split a comma-separated field value into trimmed, non-empty names."""
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_line(line: str, lineno: int = 0) -> Optional[LineRecord]:
    """
    Extract labeled fields from one line of free text.

    Each label's value runs from its colon to the next ``;`` or the end of
    the line. Labels are case-insensitive and a repeated label overrides the
    earlier one on the same line.

    Examples:
        "NAME: Alice"
        "name: Alice; parents: Bob, Carol; SPOUSES: Dan"

    Returns None when the line has no NAME field or the NAME value is empty.
    """
    raw = line.strip()
    fields: Dict[str, str] = {}

    for match in FIELD_PATTERN.finditer(raw):
        fields[match.group(1).upper()] = match.group(2).strip()

    name = fields.get("NAME", "")
    if not name:
        return None

    return LineRecord(
        lineno=lineno,
        name=name,
        parents=tuple(split_names(fields.get("PARENTS", ""))),
        spouses=tuple(split_names(fields.get("SPOUSES", ""))),
        siblings=tuple(split_names(fields.get("SIBLINGS", ""))),
        children=tuple(split_names(fields.get("CHILDREN", ""))),
        raw=raw,
    )


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(lineno, line)`` for every non-blank line of ``text``.

    CRLF, lone CR and lone LF are all accepted as line breaks.
    """
    for lineno, raw_line in enumerate(_LINE_BREAK.split(text), start=1):
        line = raw_line.strip()
        if line:
            yield lineno, line


def parse_text(text: str) -> Iterator[LineRecord]:
    """Yield a LineRecord for each line of ``text`` that names a person."""
    for lineno, line in iter_lines(text):
        record = parse_line(line, lineno=lineno)
        if record is not None:
            yield record
