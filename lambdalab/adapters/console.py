"""
Console adapters.

Implementations of ConsolePort: one writing to a text stream, one
keeping lines in memory.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

logger = logging.getLogger(__name__)


@dataclass
class StdoutConsole:
    """
    Console adapter printing each value on its own line.

    Writes to ``stream`` when given, otherwise to whatever ``sys.stdout``
    is at write time.
    """

    stream: TextIO | None = None

    def write(self, value: object) -> None:
        print(value, file=self.stream or sys.stdout)


@dataclass
class RecordingConsole:
    """In-memory console for tests and programmatic use."""

    lines: list[str] = field(default_factory=list)

    def write(self, value: object) -> None:
        logger.debug("RecordingConsole.write: %r", value)
        self.lines.append(str(value))

    def clear(self) -> None:
        self.lines.clear()
