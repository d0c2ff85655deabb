"""fpkit: small functional-programming primitives.

Immutability, composition, currying, higher-order helpers, and functor/monad
wrapper types.
"""

from fpkit.core import (
    Container,
    Functor,
    Identity,
    Just,
    Maybe,
    Monad,
    Nothing,
    NothingType,
)
from fpkit.functional.composition import compose, flow, identity, pipe
from fpkit.functional.currying import arity_of, curry, uncurry
from fpkit.functional.higher_order import constant, flip, lift, memoize, tap
from fpkit.functional.immutable import dissoc, freeze, update, update_in

__all__ = [
    "Container",
    "Functor",
    "Identity",
    "Just",
    "Maybe",
    "Monad",
    "Nothing",
    "NothingType",
    "compose",
    "flow",
    "identity",
    "pipe",
    "arity_of",
    "curry",
    "uncurry",
    "constant",
    "flip",
    "lift",
    "memoize",
    "tap",
    "dissoc",
    "freeze",
    "update",
    "update_in",
]
