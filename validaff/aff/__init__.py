"""
Aff
===

Lazy, continuation-based effect values.

    from validaff import aff

    greeting = aff.pure(5).map(lambda x: x * 2).map(lambda x: x + 1)
    greeting(print)            # <Result: Ok(11)>
    aff.run_sync(greeting)     # Ok(11)

Nothing runs until the Aff is invoked with a callback.
"""

from .monad import Aff
from .up import catching, defer, fail, from_optional, from_result, pure
from .down import or_else, run, run_sync
from .collection import fold, sequence, traverse

__all__ = (
    "Aff",
    # Up
    "catching",
    "defer",
    "fail",
    "from_optional",
    "from_result",
    "pure",
    # Down
    "or_else",
    "run",
    "run_sync",
    # Collection
    "fold",
    "sequence",
    "traverse",
)
