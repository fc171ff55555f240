"""
Validation
==========

Valid[T] | Invalid[E] with error-accumulating apply.

    from validaff import validation as V

    V.apply(V.apply(V.ok(make_user), check_name(raw), concat), check_age(raw), concat)

flat_map_v is the only sequential combinator and it does not accumulate:
there is deliberately no monadic bind for Validation.
"""

from .value import Invalid, Valid, Validation
from .ops import (
    apply,
    bimap,
    bitap,
    error,
    flat_map_v,
    flip,
    fold,
    from_result,
    is_error,
    is_ok,
    map,
    map_error,
    ok,
    pure,
    tap,
    tap_error,
    to_result,
)
from .collection import map2, sequence, traverse

__all__ = (
    # Types
    "Invalid",
    "Valid",
    "Validation",
    # Constructors
    "error",
    "from_result",
    "ok",
    "pure",
    "to_result",
    # Inspection
    "is_error",
    "is_ok",
    # Transformation
    "bimap",
    "bitap",
    "flip",
    "fold",
    "map",
    "map_error",
    "tap",
    "tap_error",
    # Composition
    "apply",
    "flat_map_v",
    # Collection
    "map2",
    "sequence",
    "traverse",
)
