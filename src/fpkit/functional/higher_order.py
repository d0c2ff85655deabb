"""Higher-order helpers: functions that take or return functions."""

from typing import Any, Callable, TypeVar

import toolz

from fpkit.core.protocol import Functor

__all__ = [
    "constant",
    "flip",
    "tap",
    "memoize",
    "lift",
]

A = TypeVar("A")
B = TypeVar("B")

# flip(fn)(a, b) == fn(b, a); curried, so flip(fn, a)(b) works too
flip = toolz.flip


def constant(x: A) -> Callable[..., A]:
    return lambda *_, **__: x


def tap(fn: Callable[[A], Any]) -> Callable[[A], A]:
    """Run ``fn`` for its side effect and pass the input through."""
    return toolz.curry(toolz.do, fn)


def memoize(fn: Callable[..., B]) -> Callable[..., B]:
    """Cache results of ``fn`` without a size limit.

    Only sound for pure, deterministic functions: the same arguments must
    always produce the same result and calling ``fn`` must have no observable
    effect. Arguments must be hashable.
    """
    return toolz.memoize(fn)


def lift(fn: Callable[[A], B]) -> Callable[[Functor], Functor]:
    """Turn ``fn`` into a function over functors: ``lift(f)(w) == w.map(f)``."""

    def lifted(functor: Functor) -> Functor:
        return functor.map(fn)

    return lifted
