"""Function composition.

``compose`` applies functions right to left, the way they are written in
mathematical notation, while ``flow`` and ``pipe`` read left to right:

    >>> from fpkit.functional.composition import compose, flow, pipe
    >>> inc = lambda x: x + 1
    >>> double = lambda x: x * 2
    >>> compose(inc, double)(3)
    7
    >>> flow(inc, double)(3)
    8
    >>> pipe(3, inc, double)
    8

The rightmost function of a composition receives every call argument,
keywords included; the others receive the previous result. Compositions of
picklable functions are picklable.
"""

import typing as tp

from toolz import compose as _compose
from toolz import compose_left as _compose_left
from toolz import identity
from toolz import pipe as _pipe

__all__ = [
    "identity",
    "compose",
    "flow",
    "pipe",
]


def compose(*funcs: tp.Callable) -> tp.Callable:
    """Compose callables right to left: ``compose(f, g)(x) == f(g(x))``.

    Composing zero functions yields ``identity``.
    """
    return _compose(*funcs)


def flow(*funcs: tp.Callable) -> tp.Callable:
    """Compose callables left to right: ``flow(f, g)(x) == g(f(x))``."""
    return _compose_left(*funcs)


def pipe(value, *funcs: tp.Callable):
    """Thread ``value`` through ``funcs`` from left to right."""
    return _pipe(value, *funcs)
