"""
FirstMatch component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ._impl import FirstMatch, FirstMatchError

# --- Input Models ---


@dataclass(frozen=True)
class FindFirstInput:
    """Input for finding the first matching element."""

    sequence: Iterable[int]
    predicates: tuple[Callable[[int], bool], ...] = ()
    transform: Callable[[int], int] = field(default=lambda n: n)


# --- Output Models ---


@dataclass(frozen=True)
class FindFirstOutput:
    """Output of a first-match search."""

    value: int | None
    match: FirstMatch | None = None
    errors: list[FirstMatchError] = field(default_factory=list)
    success: bool = True

    @property
    def found(self) -> bool:
        return self.match is not None
