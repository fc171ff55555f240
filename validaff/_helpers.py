"""Internal helpers for validaff.

Small function utilities used across the Validation and Aff modules.
Not part of the public API, but handy when writing custom bundles."""

from __future__ import annotations

import typing
from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def compose[A, B, C](g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """
    Right-to-left composition: compose(g, f)(x) == g(f(x)).
    
    Used to state the functor composition law.
    """
    return lambda x: g(f(x))

def discard(outcome: typing.Any, /) -> None:
    """Completion callback that drops the outcome. Used by run()."""
    _ = outcome

# Values collected newest-first as (value, rest) pairs. Lets traverse grow its
# result in constant time per item and build the list once at the end.
type Chain[T] = tuple[T, Chain[T]] | None

def push[T](chain: Chain[T], value: T) -> Chain[T]:
    return (value, chain)

def chain_to_list[T](chain: Chain[T]) -> list[T]:
    """Unroll a Chain into a list in insertion order."""
    values: list[T] = []
    while chain is not None:
        value, chain = chain
        values.append(value)
    values.reverse()
    return values

__all__ = (
    "Chain",
    "chain_to_list",
    "compose",
    "discard",
    "identity",
    "push",
)
