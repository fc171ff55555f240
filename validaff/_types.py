"""
Core type definitions for validaff.

Aliases shared by the Validation and Aff halves of the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Callback = completion callback receiving the single outcome of an Aff
type Callback[T, E] = Callable[[Result[T, E]], None]

# Acceptor = what an Aff wraps: give it a callback and it starts the work
type Acceptor[T, E] = Callable[[Callback[T, E]], None]

# Combine = associative binary operation merging two errors into one
type Combine[E] = Callable[[E, E], E]

# NoError = error type of computations that cannot fail
# NOTE: Never (bottom type) instead of None: such an error is never constructed.
type NoError = typing.Never

__all__ = (
    "Acceptor",
    "Callback",
    "Combine",
    "NoError",
)
