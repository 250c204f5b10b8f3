"""
FirstMatch core - lazy "first element passing all predicates, transformed".

Pure functions, no I/O.

Key behaviors:
- Elements are scanned in order and pulled from the iterable lazily
- Predicates run in the order given, stopping at the first failure
- An empty predicate chain accepts every element
- The transform runs once on the first match, or not at all
- DomainError raised by the transform propagates to the caller
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from lambdalab.domain.functions import Predicate, Transform


@dataclass(frozen=True)
class FirstMatch:
    """The first element that passed every predicate."""

    index: int
    element: int
    value: int


@dataclass(frozen=True)
class FirstMatchError:
    """Input validation error."""

    code: str
    message: str
    field: str | None = None


def matches_all(element: int, predicates: Sequence[Predicate]) -> bool:
    """Check ``element`` against each predicate, stopping at the first failure."""
    for predicate in predicates:
        if not predicate(element):
            return False
    return True


def find_first_match(
    sequence: Iterable[int],
    predicates: Sequence[Predicate],
    transform: Transform,
) -> FirstMatch | None:
    """
    Find and transform the first element satisfying all predicates.

    Args:
        sequence: Integers to scan, in order. Consumed up to the match.
        predicates: Predicate chain, combined with AND.
        transform: Applied to the matched element only.

    Returns:
        FirstMatch with index, element and transformed value, or None.
    """
    for index, element in enumerate(sequence):
        if matches_all(element, predicates):
            return FirstMatch(index=index, element=element, value=transform(element))
    return None


def find_first_transformed(
    sequence: Iterable[int],
    predicates: Sequence[Predicate],
    transform: Transform,
) -> int | None:
    """Transformed value of the first element passing all predicates, or None."""
    match = find_first_match(sequence, predicates, transform)
    return None if match is None else match.value


def validate_sequence(sequence: Sequence[object]) -> list[FirstMatchError]:
    errors: list[FirstMatchError] = []
    for index, element in enumerate(sequence):
        # bool is an int subclass but never a valid element
        if isinstance(element, bool) or not isinstance(element, int):
            errors.append(
                FirstMatchError(
                    code="element_not_int",
                    message=f"Element at index {index} is not an integer: {element!r}",
                    field="sequence",
                )
            )
    return errors


def validate_callables(
    predicates: Sequence[object],
    transform: object,
) -> list[FirstMatchError]:
    errors: list[FirstMatchError] = []
    for index, predicate in enumerate(predicates):
        if not callable(predicate):
            errors.append(
                FirstMatchError(
                    code="predicate_not_callable",
                    message=f"Predicate at index {index} is not callable",
                    field="predicates",
                )
            )
    if not callable(transform):
        errors.append(
            FirstMatchError(
                code="transform_not_callable",
                message="Transform is not callable",
                field="transform",
            )
        )
    return errors
