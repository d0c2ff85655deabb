"""Core wrapper types and interfaces."""

from fpkit.core.protocol import Functor, Monad
from fpkit.core.containers import (
    Container,
    Identity,
    Maybe,
    Just,
    NothingType,
    Nothing,
)

__all__ = [
    "Functor",
    "Monad",
    "Container",
    "Identity",
    "Maybe",
    "Just",
    "NothingType",
    "Nothing",
]
