"""Currying: n-ary functions as chains of unary functions.

``curry(f, n)`` returns a function of one argument which returns another
function of one argument, and so on ``n`` times; the last call evaluates
``f`` with every collected argument. Each step keeps its arguments in a tuple
and never modifies it, so a partially applied step can be reused:

    >>> from fpkit.functional.currying import curry
    >>> add3 = curry(lambda a, b, c: a + b + c)
    >>> add_one = add3(1)
    >>> add_one(2)(3), add_one(10)(20)
    (6, 31)

``uncurry`` goes the other way, and ``arity_of`` reports how many required
positional parameters a function declares.
"""

import functools
import inspect
from typing import Any, Callable, Optional, Tuple

from fpkit.core.config import settings
from fpkit.core.types import validate_arity
from fpkit.logger.logger import logger

__all__ = [
    "arity_of",
    "curry",
    "uncurry",
]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def arity_of(fn: Callable) -> int:
    """Count the required positional parameters of ``fn``.

    Parameters with defaults, ``*args``, ``**kwargs`` and keyword-only
    parameters are not counted.

    Raises:
        ValueError: If the signature of ``fn`` cannot be inspected.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"Cannot determine the arity of {fn!r}; pass it explicitly."
        ) from e

    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def _check_accepts(fn: Callable, arity: int) -> None:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        logger.debug(f"No signature for {fn!r}; skipping arity check")
        return

    try:
        sig.bind(*range(arity))
    except TypeError as e:
        raise ValueError(
            f"{getattr(fn, '__name__', fn)!s} cannot take {arity} positional arguments: {e}"
        ) from e


def curry(fn: Callable, arity: Optional[int] = None) -> Callable[[Any], Any]:
    """Transform ``fn`` into a chain of ``arity`` unary functions.

    Args:
        fn: Function to curry.
        arity: Number of arguments to collect before calling ``fn``. Defaults
            to ``arity_of(fn)``.

    Returns:
        The first unary function of the chain.

    Raises:
        ValueError: If ``arity`` is not an integer >= 1, or, when
            ``settings.STRICT_ARITY`` is on, ``fn`` cannot take that many
            positional arguments.
    """
    n = validate_arity(arity_of(fn) if arity is None else arity)
    if settings.STRICT_ARITY:
        _check_accepts(fn, n)

    logger.debug(f"Currying {getattr(fn, '__name__', fn)!s} with arity {n}")

    def step(collected: Tuple[Any, ...]) -> Callable[[Any], Any]:
        @functools.wraps(fn)
        def unary(arg):
            args = collected + (arg,)
            if len(args) == n:
                return fn(*args)
            return step(args)

        # The wrapped signature is not the signature of a step
        del unary.__wrapped__
        return unary

    return step(())


def uncurry(chain: Callable[[Any], Any], arity: int) -> Callable[..., Any]:
    """Turn a chain of ``arity`` unary functions back into an n-ary function.

    Raises:
        ValueError: If ``arity`` is not an integer >= 1.
    """
    n = validate_arity(arity)

    def uncurried(*args):
        if len(args) != n:
            raise TypeError(f"Expected {n} positional arguments, got {len(args)}.")
        result = chain
        for arg in args:
            result = result(arg)
        return result

    return uncurried
