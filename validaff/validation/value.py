"""
Validation - error-accumulating result
======================================

Valid[T] | Invalid[E]: a two-armed value like kungfu's Result, except that
apply() merges the errors of two independent failures instead of keeping
only the first one.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from reprlib import recursive_repr

from kungfu import Error, Ok, Result

from .._types import Combine


class Valid[T]:
    """Success variant of Validation containing a value."""

    __slots__ = ("_value",)
    __match_args__ = ("_value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @recursive_repr()
    def __repr__(self) -> str:
        return f"Valid({self._value!r})"

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Valid):
            return NotImplemented
        return self._value == other.value

    def __hash__(self) -> int:
        return hash((Valid, self._value))

    @property
    def value(self) -> T:
        """The wrapped success value."""
        return self._value

    def is_ok(self) -> typing.Literal[True]:
        return True

    def is_error(self) -> typing.Literal[False]:
        return False

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Valid[U]:
        """Apply f to the success value."""
        return Valid(f(self._value))

    def map_error[F](self, f: Callable[[typing.Any], F], /) -> Valid[T]:
        """Error channel is empty, return self."""
        _ = f
        return self

    def bimap[U, F](self, on_ok: Callable[[T], U], on_error: Callable[[typing.Any], F], /) -> Valid[U]:
        """Apply on_ok; on_error is never called for Valid."""
        _ = on_error
        return Valid(on_ok(self._value))

    # Observation

    def tap(self, effect: Callable[[T], None], /) -> Valid[T]:
        """Run effect on the value, return self unchanged."""
        effect(self._value)
        return self

    def tap_error(self, effect: Callable[[typing.Any], None], /) -> Valid[T]:
        _ = effect
        return self

    def bitap(self, on_ok: Callable[[T], None], on_error: Callable[[typing.Any], None], /) -> Valid[T]:
        _ = on_error
        on_ok(self._value)
        return self

    # Elimination

    def fold[C](self, on_error: Callable[[typing.Any], C], on_ok: Callable[[T], C], /) -> C:
        """Total elimination: exactly one branch runs (on_ok here)."""
        _ = on_error
        return on_ok(self._value)

    def flip(self) -> Invalid[T]:
        """Swap success and error roles: Valid(a) -> Invalid(a)."""
        return self.fold(Valid, Invalid)

    # Composition

    def apply[A, B, E](
        self: Valid[Callable[[A], B]],
        other: Validation[A, E],
        append: Combine[E],
        /,
    ) -> Validation[B, E]:
        """
        Applicative apply with self holding a function.

        Valid(f) with Valid(a) gives Valid(f(a)); with Invalid(e) gives
        Invalid(e) unchanged. append is only used when both sides fail.
        """
        _ = append
        match other:
            case Valid(value):
                return Valid(self._value(value))
            case Invalid(_):
                return other

    def flat_map_v[U, E](self, f: Callable[[T], Validation[U, E]], /) -> Validation[U, E]:
        """Sequential composition, f's result is returned verbatim."""
        return f(self._value)

    def to_result(self) -> Ok[T]:
        return Ok(self._value)


class Invalid[E]:
    """Failure variant of Validation containing an error."""

    __slots__ = ("_error",)
    __match_args__ = ("_error",)

    def __init__(self, error: E, /) -> None:
        self._error = error

    @recursive_repr()
    def __repr__(self) -> str:
        return f"Invalid({self._error!r})"

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Invalid):
            return NotImplemented
        return self._error == other.error

    def __hash__(self) -> int:
        return hash((Invalid, self._error))

    @property
    def error(self) -> E:
        """The wrapped error."""
        return self._error

    def is_ok(self) -> typing.Literal[False]:
        return False

    def is_error(self) -> typing.Literal[True]:
        return True

    # Functor operations

    def map[U](self, f: Callable[[typing.Any], U], /) -> Invalid[E]:
        """Success channel is empty, return self."""
        _ = f
        return self

    def map_error[F](self, f: Callable[[E], F], /) -> Invalid[F]:
        """Apply f to the error."""
        return Invalid(f(self._error))

    def bimap[U, F](self, on_ok: Callable[[typing.Any], U], on_error: Callable[[E], F], /) -> Invalid[F]:
        _ = on_ok
        return Invalid(on_error(self._error))

    # Observation

    def tap(self, effect: Callable[[typing.Any], None], /) -> Invalid[E]:
        _ = effect
        return self

    def tap_error(self, effect: Callable[[E], None], /) -> Invalid[E]:
        """Run effect on the error, return self unchanged."""
        effect(self._error)
        return self

    def bitap(self, on_ok: Callable[[typing.Any], None], on_error: Callable[[E], None], /) -> Invalid[E]:
        _ = on_ok
        on_error(self._error)
        return self

    # Elimination

    def fold[C](self, on_error: Callable[[E], C], on_ok: Callable[[typing.Any], C], /) -> C:
        """Total elimination: exactly one branch runs (on_error here)."""
        _ = on_ok
        return on_error(self._error)

    def flip(self) -> Valid[E]:
        """Swap success and error roles: Invalid(e) -> Valid(e)."""
        return self.fold(Valid, Invalid)

    # Composition

    def apply[A, B](
        self,
        other: Validation[A, E],
        append: Combine[E],
        /,
    ) -> Invalid[E]:
        """
        Applicative apply on a failed function side.

        Invalid(e1) with Valid(_) keeps Invalid(e1); with Invalid(e2) gives
        Invalid(append(e1, e2)), left error first.
        """
        match other:
            case Valid(_):
                return self
            case Invalid(error):
                return Invalid(append(self._error, error))

    def flat_map_v[U](self, f: Callable[[typing.Any], Validation[U, E]], /) -> Invalid[E]:
        """Short-circuit: f is never called."""
        _ = f
        return self

    def to_result(self) -> Error[E]:
        return Error(self._error)


type Validation[T, E] = Valid[T] | Invalid[E]


def from_result[T, E](result: Result[T, E], /) -> Validation[T, E]:
    """Convert kungfu Result: Ok -> Valid, Error -> Invalid."""
    match result:
        case Ok(value):
            return Valid(value)
        case Error(error):
            return Invalid(error)
        case _ as unreachable:
            typing.assert_never(unreachable)


__all__ = (
    "Invalid",
    "Valid",
    "Validation",
    "from_result",
)
