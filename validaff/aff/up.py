"""
Lifting values into Aff.

Leaf constructors: plain values, Result, Optional and exception-based code
become Aff computations. These are the places where a chain originates.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, Ok, Result

from .._types import Callback
from .monad import Aff


def pure[T](value: T) -> Aff[T, Never]:
    """
    Lift pure value into always-succeeding Aff.

    Example:
        from validaff import aff

        user = aff.pure(User(id=42))
        aff.run_sync(user)  # Ok(User(id=42))
    """
    return Aff.pure(value)


def fail[E](error: E) -> Aff[Never, E]:
    """
    Create always-failing Aff. Dual of pure().

    NOTE: Return type Aff[Never, E] means "never produces a value".
    """
    return Aff.fail(error)


def from_result[T, E](value: Result[T, E]) -> Aff[T, E]:
    """
    Lift already-computed Result into Aff.

    NOTE: The Result itself is already computed, only its delivery is deferred.
          For lazy evaluation, use defer() with a thunk.
    """
    return Aff.from_result(value)


def from_optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Aff[T, E]:
    """
    Convert Optional to Aff. None becomes Error(error()).

    NOTE: error is a thunk (zero-arg callable) so the error is only built
          when the Aff is invoked on a missing value.
    """

    def acceptor(callback: Callback[T, E]) -> None:
        if value is None:
            callback(Error(error()))
        else:
            callback(Ok(value))

    return Aff(acceptor)


def defer[T, E](thunk: Callable[[], Aff[T, E]]) -> Aff[T, E]:
    """
    Build the Aff lazily: thunk runs on every invocation, not at construction.

    **When to use:** When constructing the computation is itself expensive or
    must observe state at run time.
    """

    def acceptor(callback: Callback[T, E]) -> None:
        thunk()(callback)

    return Aff(acceptor)


def _same[E](exc: Exception) -> E:
    return exc  # type: ignore[return-value]


def catching[T, E = Exception](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E] = _same,
) -> Aff[T, E]:
    """
    Execute sync thunk on invocation, catch exceptions and convert to Error.

    **When to use:** Bridge between exception-based code and Aff. This is the
    only place the library turns an exception into an Error, and only because
    the caller asked for it. Without on_error the error is the exception
    itself, which pairs with the AffExn capability bundle.

    Example:
        from validaff import aff
        import json

        def parse_json(raw: str) -> Aff[dict, ParseError]:
            return aff.catching(
                lambda: json.loads(raw),
                on_error=lambda e: ParseError(str(e)),
            )

    NOTE: Catches all Exception subclasses raised by thunk. Exceptions raised
          by the callback are not caught: they belong to the rest of the chain.
    """

    def acceptor(callback: Callback[T, E]) -> None:
        try:
            value = thunk()
        except Exception as exc:
            callback(Error(on_error(exc)))
            return
        callback(Ok(value))

    return Aff(acceptor)


__all__ = (
    "catching",
    "defer",
    "fail",
    "from_optional",
    "from_result",
    "pure",
)
