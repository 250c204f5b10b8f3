"""
Demo component - one computation expressed in seven styles.
"""

from ._impl import (
    COMPUTING_STYLES,
    DeferredTask,
    anonymous_task,
    higher_order_style,
    imperative_style,
    lambda_style,
    lambda_task,
    predicate_style,
    reference_style,
)
from .component import run, run_demo
from .models import DemoInput, DemoOutput, StyleResult
from .ports import ConsolePort

__all__ = [
    # Entry points
    "run",
    "run_demo",
    # Input models
    "DemoInput",
    # Output models
    "DemoOutput",
    "StyleResult",
    # Ports
    "ConsolePort",
    # _impl re-exports
    "COMPUTING_STYLES",
    "DeferredTask",
    "anonymous_task",
    "higher_order_style",
    "imperative_style",
    "lambda_style",
    "lambda_task",
    "predicate_style",
    "reference_style",
]
