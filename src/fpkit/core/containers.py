"""Wrapper types for values that are lifted into a functor or monad.

A wrapper holds exactly one value and is never mutated after creation. The
held value is treated as opaque: it is not validated, coerced or copied.
Every operation returns a new wrapper and leaves the receiver untouched.

Three wrappers are provided:
    - **Container**: a plain functor exposing ``map``.
    - **Identity**: the simplest monad, adding ``flat_map`` and ``join``.
    - **Maybe**: a monad for optional values, either ``Just(value)`` or
      ``Nothing``; ``map`` and ``flat_map`` short-circuit on ``Nothing``.

Examples:
    >>> from fpkit.core.containers import Identity
    >>>
    >>> (
    ...     Identity(3)
    ...     .flat_map(lambda x: Identity(x**2))
    ...     .flat_map(lambda x: Identity(x / 2))
    ...     .value()
    ... )
    4.5
"""

from typing import Any, Callable, Generic, TypeVar
from pydantic import BaseModel, ConfigDict

from .protocol import Functor, Monad

__all__ = [
    "Container",
    "Identity",
    "Maybe",
    "Just",
    "NothingType",
    "Nothing",
]

T = TypeVar("T")
U = TypeVar("U")


class Container(BaseModel, Functor, Generic[T]):
    """Immutable single-value functor.

    ``Container(value)`` and ``Container.of(value)`` are equivalent. Two
    containers are equal when they are of the same wrapper class and their
    held values compare equal.

    Attributes:
        inner: The held value. Assignment raises ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    inner: Any

    def __init__(self, value: Any = None, /) -> None:
        super().__init__(inner=value)

    @classmethod
    def of(cls, value: Any) -> "Container":
        """Lift a plain value into this wrapper type."""
        return cls(value)

    def map(self, fn: Callable[[T], U]) -> "Container[U]":
        return type(self)(fn(self.inner))

    def value(self) -> T:
        return self.inner

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"

    def __str__(self) -> str:
        return repr(self)


def _ensure_monad(result: Any) -> Monad:
    if not isinstance(result, Monad):
        raise TypeError(
            f"flat_map expects a function returning a monad, got {type(result).__name__}."
        )
    return result


class Identity(Container[T], Monad, Generic[T]):
    """Monad that adds nothing but sequencing to the held value."""

    def flat_map(self, fn: Callable[[T], Monad]) -> Monad:
        """Apply a wrapping function and return its result without re-wrapping.

        Args:
            fn: Function from the held value to a monad.

        Returns:
            The monad returned by ``fn``.

        Raises:
            TypeError: If ``fn`` returns something that is not a monad.
        """
        return _ensure_monad(fn(self.inner))

    def join(self) -> Monad:
        """Remove one level of nesting."""
        return self.flat_map(lambda inner: inner)


class Maybe(Container[T], Monad, Generic[T]):
    """Optional value, either a ``Just`` or ``Nothing``.

    Only ``Maybe.of(None)`` lifts to ``Nothing``. Mapping a ``Just`` to
    ``None`` gives ``Just(None)``, which keeps ``map`` lawful.
    """

    @classmethod
    def of(cls, value: Any) -> "Maybe":
        if value is None:
            return Nothing
        return Just(value)

    def is_nothing(self) -> bool:
        return False

    def flat_map(self, fn: Callable[[T], Monad]) -> Monad:
        return _ensure_monad(fn(self.inner))

    def get_or_else(self, default: Any) -> Any:
        return self.inner


class Just(Maybe[T], Generic[T]):
    """A present value. ``Just(None)`` holds ``None``; it is not ``Nothing``."""


class NothingType(Maybe):
    """The absent value. Use the ``Nothing`` singleton."""

    def is_nothing(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "NothingType":
        return self

    def flat_map(self, fn: Callable[[Any], Monad]) -> "NothingType":
        return self

    def get_or_else(self, default: Any) -> Any:
        return default

    def __repr__(self) -> str:
        return "Nothing"


Nothing: NothingType = NothingType()
