"""
Demo component - run the same computation in every style and compare.

Invariants:
- Deferred tasks are built but never started
- Every computing style receives the same numbers, threshold and factor
- Output reports whether all styles agreed
"""

from __future__ import annotations

import logging

from ._impl import COMPUTING_STYLES, anonymous_task, lambda_task
from .models import DemoInput, DemoOutput, StyleResult
from .ports import ConsolePort

logger = logging.getLogger(__name__)


def _discard(value: object) -> None:
    return None


def run_demo(
    inp: DemoInput,
    *,
    console: ConsolePort | None = None,
) -> DemoOutput:
    """
    Run every computing style over the input numbers.

    Args:
        inp: Numbers, threshold and factor shared by all styles.
        console: Optional console port; receives one line per style.

    Returns:
        DemoOutput with per-style results and the unstarted tasks.
    """
    write = console.write if console is not None else _discard
    tasks = (anonymous_task(write), lambda_task(write))

    results: list[StyleResult] = []
    for name, style in COMPUTING_STYLES:
        value = style(inp.numbers, inp.threshold, inp.factor)
        logger.debug("style %s -> %r", name, value)
        results.append(StyleResult(style=name, value=value))
        if console is not None:
            console.write(f"{name}: {'none' if value is None else value}")

    output = DemoOutput(results=tuple(results), tasks=tasks)

    if not output.consistent:
        logger.warning(
            "Styles disagree: %s",
            ", ".join(f"{r.style}={r.value!r}" for r in output.results),
        )
        return DemoOutput(
            results=output.results,
            tasks=tasks,
            errors=["styles produced different results"],
            success=False,
        )

    return output


def run(
    inp: DemoInput,
    *,
    console: ConsolePort | None = None,
) -> DemoOutput:
    """
    Main entry point for the demo component.

    Args:
        inp: Input object determining the operation.
        console: Optional console port.

    Returns:
        Output object for the operation.
    """
    if isinstance(inp, DemoInput):
        return run_demo(inp, console=console)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
