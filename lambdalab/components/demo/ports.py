"""
Demo component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ConsolePort(Protocol):
    """Port for writing a value to the console."""

    def write(self, value: object) -> None:
        """Write one value as a line."""
        ...
