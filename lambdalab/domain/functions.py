"""
Named predicates, transforms and function factories.

Every function here is pure. Factories return closures that capture
their configuration argument when they are created, so a predicate built
with ``greater_than(3)`` keeps testing against 3 for its whole life.

Key behaviors:
- Predicates map int -> bool, transforms map int -> int
- ``all_of`` combines predicates with short-circuit AND
- ``defined_on`` turns a total transform into a partial one that raises
  DomainError outside its domain
"""

from __future__ import annotations

from collections.abc import Callable

Predicate = Callable[[int], bool]
Transform = Callable[[int], int]


class DomainError(ValueError):
    """Raised when a transform is applied to a value it is not defined for."""

    def __init__(self, value: int, name: str | None = None) -> None:
        self.value = value
        self.name = name
        label = name or "transform"
        super().__init__(f"{label} is not defined for {value!r}")


# --- Named predicates ---


def is_even(number: int) -> bool:
    return number % 2 == 0


def is_greater_than_3(number: int) -> bool:
    return number > 3


# --- Factories ---


def greater_than(threshold: int) -> Predicate:
    """Build a predicate testing ``number > threshold``."""

    def _predicate(number: int) -> bool:
        return number > threshold

    _predicate.__name__ = f"greater_than_{threshold}"
    return _predicate


def multiply_by(factor: int) -> Transform:
    """Build a transform returning ``number * factor``."""

    def _transform(number: int) -> int:
        return number * factor

    _transform.__name__ = f"multiply_by_{factor}"
    return _transform


def all_of(*predicates: Predicate) -> Predicate:
    """
    Combine predicates with logical AND.

    Evaluation stops at the first predicate returning False. With no
    predicates the result accepts every number.
    """
    chain = tuple(predicates)

    def _predicate(number: int) -> bool:
        return all(p(number) for p in chain)

    return _predicate


def defined_on(
    transform: Transform,
    domain: Predicate,
    name: str | None = None,
) -> Transform:
    """
    Restrict a transform to the numbers accepted by ``domain``.

    Args:
        transform: The underlying total transform.
        domain: Predicate describing where the result is defined.
        name: Label used in the DomainError message.

    Returns:
        A transform raising DomainError for numbers outside ``domain``.
    """
    label = name or getattr(transform, "__name__", None)

    def _partial(number: int) -> int:
        if not domain(number):
            raise DomainError(number, label)
        return transform(number)

    return _partial


__all__ = [
    "DomainError",
    "Predicate",
    "Transform",
    "all_of",
    "defined_on",
    "greater_than",
    "is_even",
    "is_greater_than_3",
    "multiply_by",
]
