"""
FirstMatch component - lazy first-match-then-transform over integers.
"""

from ._impl import (
    FirstMatch,
    FirstMatchError,
    find_first_match,
    find_first_transformed,
    matches_all,
    validate_callables,
    validate_sequence,
)
from .component import run, run_find
from .models import FindFirstInput, FindFirstOutput

__all__ = [
    # Entry points
    "run",
    "run_find",
    # Input models
    "FindFirstInput",
    # Output models
    "FindFirstOutput",
    "FirstMatch",
    "FirstMatchError",
    # Core functions
    "find_first_match",
    "find_first_transformed",
    "matches_all",
    "validate_callables",
    "validate_sequence",
]
