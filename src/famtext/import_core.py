"""
import_core.py
Free-text import engine: text in, leveled tree JSON out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from famtext.config import get_config
from famtext.core.exceptions import (
    EmptyInputError,
    NoValidEntriesError,
    SerializationFailureError,
    TreeImportError,
)
from famtext.exporter import OutputPerson, build_document, serialize_document
from famtext.loader import parse_text
from famtext.logging import get_logger
from famtext.postprocess import LevelResult, solve_levels
from famtext.registry import PersonRegistry, build_registry


@dataclass(frozen=True)
class ImportResult:
    """
    Outcome of one import: exactly one of ``document`` / ``error`` is set.
    """
    document: Optional[str] = None
    error: Optional[TreeImportError] = None

    people: List[OutputPerson] = field(default_factory=list)
    level_result: Optional[LevelResult] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None


class TreeImporter:
    """
    High-level importer:
      - splits and parses lines
      - merges repeated mentions
      - solves levels
      - builds and serializes the document
    """

    def __init__(self, config=None, max_rounds: Optional[int] = None, indent: Optional[int] = None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("import_core")

        self.max_rounds = max_rounds if max_rounds is not None else self.cfg.max_rounds
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {self.max_rounds}")
        self.indent = indent if indent is not None else self.cfg.indent

    # ---------------------------------------------------------
    # Structured import (raises)
    # ---------------------------------------------------------
    def build(self, text: str) -> Tuple[PersonRegistry, LevelResult, List[OutputPerson]]:
        """
        Parse, merge and level ``text``.
        Raises EmptyInputError / NoValidEntriesError.
        """
        if text is None or not text.strip():
            raise EmptyInputError()

        registry = build_registry(parse_text(text))
        if len(registry) == 0:
            raise NoValidEntriesError()

        level_result = solve_levels(registry, max_rounds=self.max_rounds)
        people = build_document(registry, level_result.levels)
        return registry, level_result, people

    def serialize(self, people: List[OutputPerson]) -> str:
        try:
            return serialize_document(people, indent=self.indent)
        except (TypeError, ValueError) as exc:
            raise SerializationFailureError(str(exc)) from exc

    # ---------------------------------------------------------
    # Document-or-error import
    # ---------------------------------------------------------
    def run(self, text: str) -> ImportResult:
        try:
            _, level_result, people = self.build(text)
            document = self.serialize(people)
        except TreeImportError as exc:
            self.log.warning("Import failed (%s): %s", exc.kind, exc.message)
            return ImportResult(error=exc)

        self.log.info("Import completed: %d person(s)", len(people))
        return ImportResult(document=document, people=people, level_result=level_result)


def import_tree(text: str, *, max_rounds: Optional[int] = None) -> ImportResult:
    """
    Convert free text into a tree JSON document.

    Never raises for malformed lines; failures come back as
    ``ImportResult.error``.
    """
    return TreeImporter(max_rounds=max_rounds).run(text)
