"""Functor and monad interface definitions."""

from abc import ABC, abstractmethod
from typing import Any, Callable


class Functor(ABC):
    """Abstract base class for containers with a structure-preserving map."""

    @abstractmethod
    def map(self, fn: Callable[[Any], Any]) -> "Functor":
        """Return a new functor of the same kind holding ``fn(value)``."""
        pass


class Monad(Functor):
    """Abstract base class for functors that can chain wrapping functions."""

    @abstractmethod
    def flat_map(self, fn: Callable[[Any], "Monad"]) -> "Monad":
        """Apply ``fn`` to the held value and return its wrapper unchanged."""
        pass
