"""
Semigroups - error combination strategies
=========================================

Validation.apply needs to know how two errors merge into one. The merge is
always supplied by the caller, either as a plain two-argument function or as
a Semigroup strategy object from this module.
"""

from __future__ import annotations

import operator
import typing
from dataclasses import dataclass

from ._types import Combine


@dataclass(frozen=True, slots=True)
class Semigroup[E]:
    """
    Associative combine for errors of type E.

    Law (the caller's responsibility, not checked):
    - Associativity: combine(combine(x, y), z) == combine(x, combine(y, z))

    Instances are callable, so they can be passed wherever an append
    function is expected:
        v.apply(va, Semigroup(operator.add))
    """

    combine: Combine[E]

    def __call__(self, left: E, right: E, /) -> E:
        return self.combine(left, right)

    def combine_all(self, first: E, *rest: E) -> E:
        """Fold one or more errors left to right."""
        acc = first
        for item in rest:
            acc = self.combine(acc, item)
        return acc


class Log[A](list[A]):
    """
    Ordered collection of validation errors.

    Each failing check reports Log.of(...) and Log.semigroup() joins the
    reports of independent checks, left operand first, so the final Invalid
    lists problems in the order the checks were applied:

        name = V.error(Log.of("name is required"))
        age = V.error(Log.of("age must be positive"))
        V.map2(make_user, name, age, Log.semigroup())
        # Invalid(Log(["name is required", "age must be positive"]))

    An empty Log joins as a no-op on either side, and joining is associative,
    which is what apply() needs to report the same errors however the checks
    are grouped.
    """

    @staticmethod
    def of[T](*errors: T) -> Log[T]:
        """Report one or more errors."""
        return Log[T](errors)

    @staticmethod
    def semigroup[T]() -> Semigroup[Log[T]]:
        """Strategy joining error reports for apply()."""
        return Semigroup(Log.combine)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Errors of self followed by errors of other, as a new Log."""
        return Log([*self, *other])

    def report(self, error: A, /) -> Log[A]:
        """New Log with one more error at the end."""
        return Log([*self, error])


# Concatenation of list / str / tuple errors
concat: Semigroup[typing.Any] = Semigroup(operator.add)


def _keep_first[E](left: E, right: E) -> E:
    _ = right
    return left


def _keep_last[E](left: E, right: E) -> E:
    _ = left
    return right


# Keep only the leftmost error (fail-fast reporting through apply)
first: Semigroup[typing.Any] = Semigroup(_keep_first)

# Keep only the rightmost error
last: Semigroup[typing.Any] = Semigroup(_keep_last)


__all__ = (
    "Log",
    "Semigroup",
    "concat",
    "first",
    "last",
)
