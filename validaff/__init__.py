"""
validaff: error-accumulating validation and lazy callback effects.

Two small building blocks for computations that can fail:
- Validation (Valid | Invalid): apply() merges independent failures with a
  caller-supplied associative combine instead of stopping at the first one
- Aff: a deferred, possibly-failing computation that runs only when invoked
  with a completion callback, composed sequentially with map / apply / flat_map

Architecture:
- validation / aff are namespaces:  from validaff import validation as V, aff
- Result interop uses kungfu's Ok / Error
- Capability bundles (typeclass) let generic algorithms target both
"""

# Core types
from ._types import Acceptor, Callback, Combine, NoError

# Internal helpers (for custom bundles)
from . import _helpers

# Validation
from . import validation
from .validation import Invalid, Valid, Validation, flat_map_v

# Aff
from . import aff
from .aff import Aff, catching, run, run_sync

# Error combination strategies
from . import semigroup
from .semigroup import Log, Semigroup, concat

# Capability bundles
from . import typeclass
from .typeclass import (
    AffExn,
    AffMonad,
    Applicative,
    Apply,
    Functor,
    Monad,
    ValidationApplicative,
    lift2,
)

# Errors
from ._errors import NotCompletedError

__all__ = (
    # Types
    "Acceptor",
    "Callback",
    "Combine",
    "NoError",
    # Internal helpers (for custom bundles)
    "_helpers",
    # Validation module (namespace import - preferred)
    "validation",
    "Invalid",
    "Valid",
    "Validation",
    "flat_map_v",
    # Aff module (namespace import - preferred)
    "aff",
    "Aff",
    "catching",
    "run",
    "run_sync",
    # Semigroups
    "semigroup",
    "Log",
    "Semigroup",
    "concat",
    # Capability bundles
    "typeclass",
    "AffExn",
    "AffMonad",
    "Applicative",
    "Apply",
    "Functor",
    "Monad",
    "ValidationApplicative",
    "lift2",
    # Errors
    "NotCompletedError",
)
