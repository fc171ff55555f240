"""
Validation collection combinators
=================================

Accumulating traverse built only from apply(): every item is checked and
every error is reported, merged left to right.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._helpers import Chain, chain_to_list, identity, push
from .._types import Combine
from .value import Valid, Validation


def map2[A, B, C, E](
    f: Callable[[A, B], C],
    va: Validation[A, E],
    vb: Validation[B, E],
    append: Combine[E],
    /,
) -> Validation[C, E]:
    """Combine two independent validations with f, accumulating errors."""
    curried = va.map(lambda a: lambda b: f(a, b))
    return curried.apply(vb, append)


def traverse[A, T, E](
    items: Iterable[A],
    handler: Callable[[A], Validation[T, E]],
    append: Combine[E],
) -> Validation[list[T], E]:
    """
    Validate every item, collect ALL errors (not fail-fast).

    Errors are merged in input order, so with list concatenation
    [bad1, ok, bad2] reports bad1's errors followed by bad2's.
    """
    acc: Validation[Chain[T], E] = Valid(None)
    for item in items:
        acc = map2(push, acc, handler(item), append)
    return acc.map(chain_to_list)


def sequence[T, E](
    validations: Iterable[Validation[T, E]],
    append: Combine[E],
) -> Validation[list[T], E]:
    """Flip structure: [Validation[T]] -> Validation[[T]]. Implemented as traverse(id)."""
    return traverse(validations, identity, append)


__all__ = ("map2", "sequence", "traverse")
