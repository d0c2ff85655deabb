"""Reusable type definitions for fpkit.

Type Aliases:
    Arity: Number of positional arguments a curried function consumes (>= 1).
    Record: A mapping-like record that supports copy-on-write updates.
"""

from typing import Annotated, Any, Mapping, Union
import annotated_types as at
from pydantic import BaseModel, TypeAdapter

__all__ = [
    "Arity",
    "Record",
    "validate_arity",
]

Record = Union[Mapping[Any, Any], BaseModel]

# Positional argument count, at least one
Arity = Annotated[int, at.Ge(1)]

_arity_adapter = TypeAdapter(Arity)


def validate_arity(value: Any) -> int:
    """Validate a curry arity.

    Raises:
        pydantic.ValidationError: If ``value`` is not an integer >= 1.
    """
    # strict: True and 2.0 are not arities
    return _arity_adapter.validate_python(value, strict=True)
