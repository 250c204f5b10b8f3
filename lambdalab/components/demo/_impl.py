"""
Demonstration styles - one computation written seven ways.

Each computing style returns the first even number greater than
``threshold``, multiplied by ``factor``, or None when there is none.

Styles:
1. Deferred task from a nested (anonymous-style) function
2. Deferred task from a lambda
3. Imperative loop with break
4. Lambdas passed to the first-match pipeline
5. Named functions passed by reference
6. A predicate bound to a variable
7. Higher-order factories returning closures
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from lambdalab.components.first_match import find_first_transformed
from lambdalab.domain.functions import (
    Predicate,
    greater_than,
    is_even,
    is_greater_than_3,
    multiply_by,
)

# --- Deferred Tasks ---


@dataclass(frozen=True)
class DeferredTask:
    """A unit of work that is built but never scheduled."""

    name: str
    action: Callable[[], None]

    @property
    def started(self) -> bool:
        return False


def anonymous_task(write: Callable[[object], None], value: object = 1) -> DeferredTask:
    def action() -> None:
        write(value)

    return DeferredTask(name="anonymous", action=action)


def lambda_task(write: Callable[[object], None], value: object = 1) -> DeferredTask:
    return DeferredTask(name="lambda", action=lambda: write(value))


# --- Computing Styles ---


def imperative_style(numbers: Sequence[int], threshold: int, factor: int) -> int | None:
    result: int | None = None
    for n in numbers:
        if n > threshold and n % 2 == 0:
            result = n * factor
            break
    return result


def lambda_style(numbers: Sequence[int], threshold: int, factor: int) -> int | None:
    return find_first_transformed(
        numbers,
        [lambda e: e % 2 == 0, lambda e: e > threshold],
        lambda e: e * factor,
    )


def reference_style(numbers: Sequence[int], threshold: int, factor: int) -> int | None:
    """
    Named functions passed by reference.

    ``is_greater_than_3`` has its threshold baked in, so any other
    threshold goes through ``greater_than``.
    """
    above: Predicate = is_greater_than_3 if threshold == 3 else greater_than(threshold)
    return find_first_transformed(numbers, [is_even, above], lambda e: e * factor)


def predicate_style(numbers: Sequence[int], threshold: int, factor: int) -> int | None:
    is_above_threshold: Predicate = lambda p: p > threshold  # noqa: E731
    return find_first_transformed(
        numbers, [is_even, is_above_threshold], lambda e: e * factor
    )


def higher_order_style(numbers: Sequence[int], threshold: int, factor: int) -> int | None:
    return find_first_transformed(
        numbers, [is_even, greater_than(threshold)], multiply_by(factor)
    )


ComputingStyle = Callable[[Sequence[int], int, int], int | None]

COMPUTING_STYLES: tuple[tuple[str, ComputingStyle], ...] = (
    ("imperative", imperative_style),
    ("lambda", lambda_style),
    ("reference", reference_style),
    ("predicate", predicate_style),
    ("higher_order", higher_order_style),
)
