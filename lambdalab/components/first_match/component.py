"""
FirstMatch component - first element passing a predicate chain, transformed.

Invariants:
- Result is the transform of the lowest-index matching element
- No element after the match is read, no predicate after a failure runs
- Empty sequence gives an absent result
- Empty predicate chain matches the first element
- DomainError from the transform is not caught here
"""

from __future__ import annotations

import logging

from ._impl import find_first_match, validate_callables, validate_sequence
from .models import FindFirstInput, FindFirstOutput

logger = logging.getLogger(__name__)


def run_find(inp: FindFirstInput) -> FindFirstOutput:
    """
    Find the first element of ``inp.sequence`` passing every predicate.

    The sequence is read once into a tuple, then validated and scanned.

    Args:
        inp: Input containing the sequence, predicate chain and transform.

    Returns:
        FindFirstOutput with the transformed value, or errors when the
        input is malformed.

    Raises:
        DomainError: If the transform is not defined at the matched element.
    """
    sequence = tuple(inp.sequence)
    errors = validate_sequence(sequence) + validate_callables(
        inp.predicates, inp.transform
    )
    if errors:
        logger.debug("run_find rejected input: %d errors", len(errors))
        return FindFirstOutput(value=None, match=None, errors=errors, success=False)

    match = find_first_match(sequence, inp.predicates, inp.transform)

    if match is None:
        logger.debug(
            "run_find: no match in %d elements (%d predicates)",
            len(sequence),
            len(inp.predicates),
        )
        return FindFirstOutput(value=None, match=None)

    logger.debug(
        "run_find: element %d at index %d -> %d",
        match.element,
        match.index,
        match.value,
    )
    return FindFirstOutput(value=match.value, match=match)


def run(inp: FindFirstInput) -> FindFirstOutput:
    """
    Main entry point for the first_match component.

    Args:
        inp: Input object determining the operation.

    Returns:
        Output object for the operation.
    """
    if isinstance(inp, FindFirstInput):
        return run_find(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
