"""
FirstMatch component unit tests.

Tests for first-match search, short-circuiting and error propagation.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from lambdalab.components.first_match import (
    FindFirstInput,
    FirstMatch,
    find_first_match,
    find_first_transformed,
    matches_all,
    run,
    run_find,
)
from lambdalab.domain.functions import (
    DomainError,
    defined_on,
    greater_than,
    is_even,
    multiply_by,
)

NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)


# --- Helpers ---


class CountingPredicate:
    """Predicate wrapper recording every value it was called with."""

    def __init__(self, predicate) -> None:
        self._predicate = predicate
        self.calls: list[int] = []

    def __call__(self, number: int) -> bool:
        self.calls.append(number)
        return self._predicate(number)


def exploding_after(values: list[int]) -> Iterator[int]:
    """Yield ``values`` then fail if anything reads further."""
    yield from values
    raise AssertionError("sequence read past the first match")


# --- Core Function Tests ---


class TestFindFirstTransformed:
    """Tests for find_first_transformed."""

    def test_even_greater_than_3_doubled(self) -> None:
        result = find_first_transformed(
            NUMBERS, [is_even, greater_than(3)], multiply_by(2)
        )
        assert result == 8

    def test_even_greater_than_9_doubled(self) -> None:
        result = find_first_transformed(
            NUMBERS, [is_even, greater_than(9)], multiply_by(2)
        )
        assert result == 20

    def test_no_match_is_absent(self) -> None:
        result = find_first_transformed(
            NUMBERS, [is_even, greater_than(10)], multiply_by(2)
        )
        assert result is None

    def test_empty_sequence_is_absent(self) -> None:
        assert find_first_transformed([], [is_even], multiply_by(2)) is None
        assert find_first_transformed([], [], multiply_by(2)) is None

    def test_empty_predicates_match_first_element(self) -> None:
        assert find_first_transformed([7, 8, 9], [], multiply_by(3)) == 21

    def test_first_not_later_match(self) -> None:
        result = find_first_transformed([5, 6, 8, 10], [is_even], lambda n: n)
        assert result == 6

    def test_same_result_on_repeat(self) -> None:
        predicates = [is_even, greater_than(3)]
        transform = multiply_by(2)
        first = find_first_transformed(NUMBERS, predicates, transform)
        second = find_first_transformed(NUMBERS, predicates, transform)
        assert first == second == 8

    def test_zero_is_a_present_result(self) -> None:
        assert find_first_transformed([0, 1], [], multiply_by(5)) == 0


class TestFindFirstMatch:
    """Tests for find_first_match."""

    def test_reports_index_and_element(self) -> None:
        match = find_first_match(NUMBERS, [is_even, greater_than(3)], multiply_by(2))
        assert match == FirstMatch(index=3, element=4, value=8)

    def test_no_match_returns_none(self) -> None:
        assert find_first_match(NUMBERS, [greater_than(100)], multiply_by(2)) is None


class TestShortCircuit:
    """Predicates and elements beyond the outcome are never evaluated."""

    def test_later_predicates_skipped_after_failure(self) -> None:
        first = CountingPredicate(is_even)
        second = CountingPredicate(greater_than(3))

        find_first_transformed(NUMBERS, [first, second], multiply_by(2))

        assert first.calls == [1, 2, 3, 4]
        assert second.calls == [2, 4]

    def test_elements_after_match_not_read(self) -> None:
        result = find_first_transformed(
            exploding_after([1, 2, 3, 4]), [is_even, greater_than(3)], multiply_by(2)
        )
        assert result == 8

    def test_transform_called_once_on_match(self) -> None:
        seen: list[int] = []

        def record(number: int) -> int:
            seen.append(number)
            return number * 2

        find_first_transformed(NUMBERS, [is_even], record)

        assert seen == [2]

    def test_transform_not_called_without_match(self) -> None:
        seen: list[int] = []

        def record(number: int) -> int:
            seen.append(number)
            return number

        find_first_transformed(NUMBERS, [greater_than(10)], record)

        assert seen == []

    def test_matches_all_stops_at_failure(self) -> None:
        never = CountingPredicate(lambda n: True)
        assert matches_all(3, [is_even, never]) is False
        assert never.calls == []

    def test_matches_all_empty_chain(self) -> None:
        assert matches_all(3, []) is True


class TestDomainError:
    """DomainError raised by a partial transform reaches the caller."""

    def test_propagates_from_core(self) -> None:
        only_small = defined_on(multiply_by(2), lambda n: n < 4, name="double_small")

        with pytest.raises(DomainError) as exc_info:
            find_first_transformed(NUMBERS, [is_even, greater_than(3)], only_small)

        assert exc_info.value.value == 4

    def test_propagates_from_component(self) -> None:
        only_small = defined_on(multiply_by(2), lambda n: n < 4)

        with pytest.raises(DomainError):
            run_find(
                FindFirstInput(
                    sequence=NUMBERS,
                    predicates=(is_even, greater_than(3)),
                    transform=only_small,
                )
            )

    def test_not_raised_for_unmatched_values(self) -> None:
        only_even = defined_on(lambda n: n // 2, is_even)
        assert find_first_transformed([1, 3, 6], [is_even], only_even) == 3


# --- Component Tests ---


class TestRunFind:
    """Tests for the run_find entry point."""

    def test_found(self) -> None:
        output = run_find(
            FindFirstInput(
                sequence=NUMBERS,
                predicates=(is_even, greater_than(3)),
                transform=multiply_by(2),
            )
        )

        assert output.success is True
        assert output.found is True
        assert output.value == 8
        assert output.match == FirstMatch(index=3, element=4, value=8)

    def test_not_found(self) -> None:
        output = run_find(FindFirstInput(sequence=(), predicates=(is_even,)))

        assert output.success is True
        assert output.found is False
        assert output.value is None

    def test_accepts_generator_sequence(self) -> None:
        output = run_find(
            FindFirstInput(
                sequence=(n for n in range(1, 11)),
                predicates=(is_even, greater_than(3)),
                transform=multiply_by(2),
            )
        )

        assert output.success is True
        assert output.value == 8
        assert output.match == FirstMatch(index=3, element=4, value=8)

    def test_generator_without_match(self) -> None:
        output = run_find(
            FindFirstInput(sequence=iter([1, 3, 5]), predicates=(is_even,))
        )

        assert output.success is True
        assert output.found is False

    def test_default_transform_is_identity(self) -> None:
        output = run_find(FindFirstInput(sequence=(3, 5, 6)))
        assert output.value == 3

    def test_rejects_non_integer_elements(self) -> None:
        output = run_find(FindFirstInput(sequence=(1, "2", 3)))  # type: ignore[arg-type]

        assert output.success is False
        assert output.value is None
        assert output.errors[0].code == "element_not_int"

    def test_rejects_bool_elements(self) -> None:
        output = run_find(FindFirstInput(sequence=(True, 2)))

        assert output.success is False
        assert output.errors[0].field == "sequence"

    def test_rejects_non_callables(self) -> None:
        output = run_find(
            FindFirstInput(
                sequence=NUMBERS,
                predicates=(is_even, 3),  # type: ignore[arg-type]
                transform="double",  # type: ignore[arg-type]
            )
        )

        codes = [e.code for e in output.errors]
        assert output.success is False
        assert codes == ["predicate_not_callable", "transform_not_callable"]

    def test_run_dispatches(self) -> None:
        output = run(FindFirstInput(sequence=NUMBERS, predicates=(is_even,)))
        assert output.value == 2

    def test_run_rejects_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run("not an input")  # type: ignore[arg-type]
