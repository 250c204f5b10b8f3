"""
Demo component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._impl import DeferredTask

# --- Input Models ---


@dataclass(frozen=True)
class DemoInput:
    """Input for running every demonstration style."""

    numbers: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
    threshold: int = 3
    factor: int = 2


# --- Output Models ---


@dataclass(frozen=True)
class StyleResult:
    """Result of one computing style."""

    style: str
    value: int | None


@dataclass(frozen=True)
class DemoOutput:
    """Output of a demonstration run."""

    results: tuple[StyleResult, ...]
    tasks: tuple[DeferredTask, ...] = ()
    errors: list[str] = field(default_factory=list)
    success: bool = True

    @property
    def consistent(self) -> bool:
        """True when every style produced the same value."""
        return len({r.value for r in self.results}) <= 1

    @property
    def value(self) -> int | None:
        """The agreed value, or None if styles disagree or none ran."""
        if not self.results or not self.consistent:
            return None
        return self.results[0].value
