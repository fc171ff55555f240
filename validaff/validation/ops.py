"""
Validation combinators
======================

Function-first sugar over the Valid / Invalid methods. Argument order puts
the functions before the validation, so partially applied combinators read
naturally:

    to_upper = functools.partial(V.map, str.upper)
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

from .._types import Combine
from .value import Invalid, Valid, Validation
from .value import from_result as from_result


# ============================================================================
# Constructors
# ============================================================================


def ok[T](value: T, /) -> Valid[T]:
    """Always-succeeding validation."""
    return Valid(value)


def pure[T](value: T, /) -> Valid[T]:
    """Applicative pure, alias of ok()."""
    return Valid(value)


def error[E](err: E, /) -> Invalid[E]:
    """Always-failing validation. Dual of ok()."""
    return Invalid(err)


def to_result[T, E](v: Validation[T, E], /) -> Result[T, E]:
    """Convert to kungfu Result: Valid -> Ok, Invalid -> Error."""
    return v.to_result()


# ============================================================================
# Inspection
# ============================================================================


def is_ok(v: Validation[typing.Any, typing.Any], /) -> bool:
    return isinstance(v, Valid)


def is_error(v: Validation[typing.Any, typing.Any], /) -> bool:
    return isinstance(v, Invalid)


# ============================================================================
# Transformation
# ============================================================================


def map[T, U, E](f: Callable[[T], U], v: Validation[T, E], /) -> Validation[U, E]:
    """Transform the success value, pass the error through."""
    return v.map(f)


def map_error[T, E, F](f: Callable[[E], F], v: Validation[T, E], /) -> Validation[T, F]:
    """Transform the error, pass the success value through."""
    return v.map_error(f)


def bimap[T, U, E, F](
    on_ok: Callable[[T], U],
    on_error: Callable[[E], F],
    v: Validation[T, E],
    /,
) -> Validation[U, F]:
    return v.bimap(on_ok, on_error)


def tap[T, E](effect: Callable[[T], None], v: Validation[T, E], /) -> Validation[T, E]:
    """Run effect on the success value, return v unchanged."""
    return v.tap(effect)


def tap_error[T, E](effect: Callable[[E], None], v: Validation[T, E], /) -> Validation[T, E]:
    """Run effect on the error, return v unchanged."""
    return v.tap_error(effect)


def bitap[T, E](
    on_ok: Callable[[T], None],
    on_error: Callable[[E], None],
    v: Validation[T, E],
    /,
) -> Validation[T, E]:
    return v.bitap(on_ok, on_error)


def flip[T, E](v: Validation[T, E], /) -> Validation[E, T]:
    """Swap the arms: Valid(a) -> Invalid(a), Invalid(e) -> Valid(e)."""
    return v.flip()


def fold[T, E, C](
    on_error: Callable[[E], C],
    on_ok: Callable[[T], C],
    v: Validation[T, E],
    /,
) -> C:
    """Eliminate v: exactly one of on_error / on_ok runs."""
    return v.fold(on_error, on_ok)


# ============================================================================
# Composition
# ============================================================================


def apply[A, B, E](
    vf: Validation[Callable[[A], B], E],
    va: Validation[A, E],
    append: Combine[E],
    /,
) -> Validation[B, E]:
    """
    Applicative apply with error accumulation.

    - Both Valid: Valid(f(a))
    - One Invalid: that error, unchanged
    - Both Invalid: Invalid(append(vf_error, va_error))

    append must be associative for chains of three or more applies to
    accumulate the same way regardless of grouping.

    Example:
        make = ok(lambda name: lambda age: User(name, age))
        apply(apply(make, check_name(raw), operator.add), check_age(raw), operator.add)
    """
    return vf.apply(va, append)


def flat_map_v[T, U, E](
    v: Validation[T, E],
    f: Callable[[T], Validation[U, E]],
    /,
) -> Validation[U, E]:
    """
    Sequential dependent composition. Does NOT accumulate.

    Invalid short-circuits without calling f. Valid(a) returns f(a)
    verbatim: nothing from v is merged into it.
    """
    return v.flat_map_v(f)


__all__ = (
    "apply",
    "bimap",
    "bitap",
    "error",
    "flat_map_v",
    "flip",
    "fold",
    "from_result",
    "is_error",
    "is_ok",
    "map",
    "map_error",
    "ok",
    "pure",
    "tap",
    "tap_error",
    "to_result",
)
