from __future__ import annotations

from typing import Iterable

from famtext.loader.line_parser import LineRecord
from famtext.logging import get_logger
from famtext.registry.entities import PersonRegistry

log = get_logger("build_registry")


def build_registry(records: Iterable[LineRecord]) -> PersonRegistry:
    """
    Fold line records into one PersonRecord per distinct name.

    Repeated mentions are merged into the first record; the result does
    not depend on the order of the lines beyond the display spelling.
    """
    registry = PersonRegistry()
    lines = 0

    for line in records:
        lines += 1
        record = registry.register(line)
        if record.mentions > 1:
            log.debug("Merged line %d into %r (mention %d)", line.lineno, record.name, record.mentions)

    log.info("Registry built: %d person line(s) -> %d person(s)", lines, len(registry))
    return registry
