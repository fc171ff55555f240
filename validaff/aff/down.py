"""
Running Aff.

Terminal operations: invoke the computation and, where possible, extract its
outcome as a Result or a plain value.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._errors import NotCompletedError
from .monad import Aff


def run(aff: Aff[None, object]) -> None:
    """
    Run for side effects only, discarding the outcome.

    **When to use:** For fire-and-forget chains of Aff[None, E] whose result
    is irrelevant and whose effects happen while the chain runs.
    """
    aff.run()


def run_sync[T, E](aff: Aff[T, E]) -> Result[T, E]:
    """
    Invoke and return the outcome delivered during the invocation.

    **When to use:** For chains whose leaves call back synchronously (pure,
    fail, catching, ...), and in tests.

    Raises:
        NotCompletedError: the callback had not fired when the invocation
            returned (a leaf deferred it to some external scheduler).
    """
    outcomes: list[Result[T, E]] = []
    aff(outcomes.append)
    if not outcomes:
        raise NotCompletedError("run_sync")
    return outcomes[0]


def or_else[T, E](aff: Aff[T, E], default: T) -> T:
    """
    Run synchronously and return the value or default.

    Raises:
        NotCompletedError: as run_sync().
    """
    match run_sync(aff):
        case Ok(value):
            return value
        case Error(_):
            return default


__all__ = (
    "or_else",
    "run",
    "run_sync",
)
