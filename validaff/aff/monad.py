"""Aff - lazy continuation-based effect

Aff[T, E] wraps an acceptor: a function that, given a completion callback,
starts the computation and eventually calls the callback with exactly one
Result[T, E].

- Lazy: building an Aff runs nothing, only aff(callback) does
- Sequential: apply / flat_map start the second operand only after the
  first one has called back
- Short-circuit: an Error skips every later stage unchanged

Whether a callback fires synchronously or later is decided by the leaf
that originates the chain, never by the combinators here.

Monadic laws:
- Left identity: Aff.pure(a).flat_map(f) ≡ f(a)
- Right identity: m.flat_map(Aff.pure) ≡ m
- Associativity: m.flat_map(f).flat_map(g) ≡ m.flat_map(lambda x: f(x).flat_map(g))"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._helpers import discard
from .._types import Acceptor, Callback

class Aff[T, E]:
    """Deferred, possibly-failing computation driven by a completion callback."""

    __slots__ = ("_acceptor",)

    def __init__(self, acceptor: Acceptor[T, E], /) -> None:
        """Create Aff from an acceptor. The acceptor is not called here."""
        self._acceptor = acceptor

    @staticmethod
    def pure[V](value: V) -> Aff[V, typing.Never]:
        """Lift a value: the callback receives Ok(value) synchronously."""

        def acceptor(callback: Callback[V, typing.Never]) -> None:
            callback(Ok(value))

        return Aff(acceptor)

    @staticmethod
    def fail[Err](error: Err) -> Aff[typing.Never, Err]:
        """Lift an error: the callback receives Error(error) synchronously."""

        def acceptor(callback: Callback[typing.Never, Err]) -> None:
            callback(Error(error))

        return Aff(acceptor)

    @staticmethod
    def from_result[V, Err](result: Result[V, Err]) -> Aff[V, Err]:
        """Deliver an already-computed Result."""

        def acceptor(callback: Callback[V, Err]) -> None:
            callback(result)

        return Aff(acceptor)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Aff[U, E]:
        """Functor fmap - apply f to the success value, pass errors through."""

        def acceptor(callback: Callback[U, E]) -> None:
            def on_outcome(outcome: Result[T, E]) -> None:
                match outcome:
                    case Ok(value):
                        callback(Ok(f(value)))
                    case Error(_):
                        callback(outcome)

            self(on_outcome)

        return Aff(acceptor)

    def map_error[F](self, f: Callable[[E], F], /) -> Aff[T, F]:
        """Map over the error channel."""

        def acceptor(callback: Callback[T, F]) -> None:
            def on_outcome(outcome: Result[T, E]) -> None:
                match outcome:
                    case Ok(_):
                        callback(outcome)
                    case Error(err):
                        callback(Error(f(err)))

            self(on_outcome)

        return Aff(acceptor)

    def void_error(self) -> Aff[T, None]:
        """Erase the error into None. Normalizes error types before merging branches."""
        return self.map_error(_to_none)

    # Applicative operations

    def apply[A, B](self: Aff[Callable[[A], B], E], other: Aff[A, E], /) -> Aff[B, E]:
        """
        Sequential apply: run self for the function, then other for the argument.

        other is not started until self has called back with Ok.
        An Error from self short-circuits and other never starts.
        """

        def acceptor(callback: Callback[B, E]) -> None:
            def on_function(outcome_f: Result[Callable[[A], B], E]) -> None:
                match outcome_f:
                    case Ok(f):
                        other.map(f)(callback)
                    case Error(_):
                        callback(outcome_f)

            self(on_function)

        return Aff(acceptor)

    # Monad operations

    def flat_map[U](self, f: Callable[[T], Aff[U, E]], /) -> Aff[U, E]:
        """
        Monadic bind (>>=).

        - On Ok: build the dependent Aff with f and run it with the final callback
        - On Error: short-circuit, f is never called
        """

        def acceptor(callback: Callback[U, E]) -> None:
            def on_outcome(outcome: Result[T, E]) -> None:
                match outcome:
                    case Ok(value):
                        f(value)(callback)
                    case Error(_):
                        callback(outcome)

            self(on_outcome)

        return Aff(acceptor)

    # Observation

    def tap(self, effect: Callable[[T], None], /) -> Aff[T, E]:
        """Execute sync side effect on the Ok value, pass the outcome through unchanged."""

        def acceptor(callback: Callback[T, E]) -> None:
            def on_outcome(outcome: Result[T, E]) -> None:
                match outcome:
                    case Ok(value):
                        effect(value)
                    case Error(_):
                        pass
                callback(outcome)

            self(on_outcome)

        return Aff(acceptor)

    def tap_error(self, effect: Callable[[E], None], /) -> Aff[T, E]:
        """Execute sync side effect on the Error value, pass the outcome through unchanged."""

        def acceptor(callback: Callback[T, E]) -> None:
            def on_outcome(outcome: Result[T, E]) -> None:
                match outcome:
                    case Error(err):
                        effect(err)
                    case Ok(_):
                        pass
                callback(outcome)

            self(on_outcome)

        return Aff(acceptor)

    # Protocol methods

    def run(self) -> None:
        """Invoke with a callback that discards the outcome (fire and forget)."""
        self(discard)

    def __call__(self, callback: Callback[T, E], /) -> None:
        """Start the computation; callback receives the single outcome."""
        self._acceptor(callback)

    def __repr__(self) -> str:
        return f"Aff({self._acceptor!r})"

def _to_none(error: object) -> None:
    _ = error

__all__ = ("Aff",)
