"""
Capability bundles
==================

Functor / Apply / Applicative / Monad as strategy objects, so generic
algorithms can be written once against "something with map/apply/pure"
and instantiated for Validation or Aff.

Python has no higher-kinded types, so the container type is typing.Any in
the protocols; each bundle documents its concrete container.

Laws every bundle is expected to satisfy:
- map: identity and composition
- apply/pure: applicative identity, homomorphism, interchange
- flat_map/pure (Aff only): left/right identity, associativity

There is no Monad bundle for Validation: a sequential bind cannot
accumulate errors, so only flat_map_v is offered, under a distinct name.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ._helpers import chain_to_list, push
from ._types import Combine
from .aff.monad import Aff
from .semigroup import Semigroup
from .validation.value import Valid, Validation


@typing.runtime_checkable
class Functor(typing.Protocol):
    def map(self, f: Callable[[typing.Any], typing.Any], fa: typing.Any, /) -> typing.Any: ...


@typing.runtime_checkable
class Apply(Functor, typing.Protocol):
    def apply(self, ff: typing.Any, fa: typing.Any, /) -> typing.Any: ...


@typing.runtime_checkable
class Applicative(Apply, typing.Protocol):
    def pure(self, value: typing.Any, /) -> typing.Any: ...


@typing.runtime_checkable
class Monad(Applicative, typing.Protocol):
    def flat_map(self, fa: typing.Any, f: Callable[[typing.Any], typing.Any], /) -> typing.Any: ...


# ============================================================================
# Validation
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationApplicative[E]:
    """
    Applicative bundle for Validation[*, E].

    The error-combination strategy is fixed per bundle, so generic code
    using apply() accumulates errors without knowing how.

    Example:
        F = ValidationApplicative(Log.semigroup())
        lift2(F, User, check_name(raw), check_age(raw))
    """

    semigroup: Semigroup[E] | Combine[E]

    def map[A, B](self, f: Callable[[A], B], fa: Validation[A, E], /) -> Validation[B, E]:
        return fa.map(f)

    def apply[A, B](
        self,
        ff: Validation[Callable[[A], B], E],
        fa: Validation[A, E],
        /,
    ) -> Validation[B, E]:
        return ff.apply(fa, self.semigroup)

    def pure[A](self, value: A, /) -> Validation[A, E]:
        return Valid(value)


# ============================================================================
# Aff
# ============================================================================


class AffMonad[E]:
    """Functor / Apply / Applicative / Monad bundle for Aff[*, E]. Stateless."""

    __slots__ = ()

    def map[A, B](self, f: Callable[[A], B], fa: Aff[A, E], /) -> Aff[B, E]:
        return fa.map(f)

    def apply[A, B](self, ff: Aff[Callable[[A], B], E], fa: Aff[A, E], /) -> Aff[B, E]:
        return ff.apply(fa)

    def pure[A](self, value: A, /) -> Aff[A, E]:
        return Aff.pure(value)

    def flat_map[A, B](self, fa: Aff[A, E], f: Callable[[A], Aff[B, E]], /) -> Aff[B, E]:
        return fa.flat_map(f)

    def __repr__(self) -> str:
        return "AffMonad()"


# Aff whose errors are exceptions; pairs with aff.catching()
AffExn: AffMonad[Exception] = AffMonad()


# ============================================================================
# Generic algorithms
# ============================================================================


def lift2[A, B, C](
    F: Apply,
    f: Callable[[A, B], C],
    fa: typing.Any,
    fb: typing.Any,
) -> typing.Any:
    """Apply a two-argument function inside any Apply: F.apply(F.map(curry(f), fa), fb)."""
    return F.apply(F.map(lambda a: lambda b: f(a, b), fa), fb)


def traverse[A](
    F: Applicative,
    items: Iterable[A],
    handler: Callable[[A], typing.Any],
) -> typing.Any:
    """
    Generic traverse using only map / apply / pure.

    For ValidationApplicative this collects every error; for AffMonad it
    runs the handlers one after another and stops at the first error.
    """
    acc = F.pure(None)
    for item in items:
        acc = lift2(F, push, acc, handler(item))
    return F.map(chain_to_list, acc)


__all__ = (
    "AffExn",
    "AffMonad",
    "Applicative",
    "Apply",
    "Functor",
    "Monad",
    "ValidationApplicative",
    "lift2",
    "traverse",
)
