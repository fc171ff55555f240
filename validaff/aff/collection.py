"""
Aff collection combinators
==========================

Strictly sequential, short-circuiting: item n+1 starts only after item n
has called back, and the first Error ends the whole run.

Leaves that call back synchronously are driven by a loop instead of nested
callbacks, so long sequences do not grow the Python stack.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from kungfu import Error, Ok, Result

from .._helpers import identity
from .._types import Callback
from .monad import Aff


def _drive[A, T, E](
    items: Sequence[A],
    index: int,
    step: Callable[[T, A], Aff[T, E]],
    acc: T,
    callback: Callback[T, E],
) -> None:
    def resume(outcome: Result[T, E]) -> None:
        match outcome:
            case Ok(value):
                _drive(items, index + 1, step, value, callback)
            case Error(_):
                callback(outcome)

    while index < len(items):
        # collected while step(...) is still on the stack, None afterwards
        inline: list[Result[T, E]] | None = []

        def on_item(outcome: Result[T, E]) -> None:
            if inline is not None:
                inline.append(outcome)
            else:
                resume(outcome)

        step(acc, items[index])(on_item)
        if not inline:
            # callback deferred by the leaf: resume() takes over from here
            inline = None
            return
        outcome = inline[0]
        inline = None
        match outcome:
            case Ok(value):
                acc = value
            case Error(_):
                callback(outcome)
                return
        index += 1

    callback(Ok(acc))


def fold[A, T, E](
    items: Sequence[A],
    handler: Callable[[T, A], Aff[T, E]],
    *,
    initial: T,
) -> Aff[T, E]:
    """Effectful fold: build up state through sequential effects."""

    def acceptor(callback: Callback[T, E]) -> None:
        _drive(items, 0, handler, initial, callback)

    return Aff(acceptor)


def traverse[A, T, E](
    items: Sequence[A],
    handler: Callable[[A], Aff[T, E]],
) -> Aff[list[T], E]:
    """Monadic map: A -> Aff[T]. Sequential to preserve effect order."""

    def step(values: list[T], item: A) -> Aff[list[T], E]:
        return handler(item).map(lambda value: _append(values, value))

    def acceptor(callback: Callback[list[T], E]) -> None:
        _drive(items, 0, step, [], callback)

    return Aff(acceptor)


def sequence[T, E](affs: Sequence[Aff[T, E]]) -> Aff[list[T], E]:
    """
    Flip structure: [Aff[T]] -> Aff[[T]].

    Implemented as traverse(id).
    """
    return traverse(affs, identity)


def _append[T](values: list[T], value: T) -> list[T]:
    # values is the list created for this invocation only
    values.append(value)
    return values


__all__ = ("fold", "sequence", "traverse")
