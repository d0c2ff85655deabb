"""Copy-on-write helpers for mapping-like records.

None of the functions in this module modify their input. Updates return a new
record of the same kind as the one passed in: a ``dict`` yields a ``dict``, a
``defaultdict`` keeps its default factory, a ``MappingProxyType`` yields a
``MappingProxyType`` and a pydantic model yields a copy of that model. Values
that are not replaced are shared between the old and the new record, so
records should hold immutable values (see ``freeze``).

Examples:
    >>> from fpkit.functional.immutable import update, update_in
    >>>
    >>> user = {"name": "Ada", "address": {"city": "London"}}
    >>> moved = update_in(user, ("address", "city"), "Paris")
    >>> user["address"]["city"], moved["address"]["city"]
    ('London', 'Paris')
"""

import copy
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Hashable,
    Mapping,
    MutableMapping,
    Optional,
    Sequence,
)
from pydantic import BaseModel
import toolz

from fpkit.core.types import Record

__all__ = [
    "update",
    "update_in",
    "dissoc",
    "freeze",
]


def _factory(record: Mapping) -> Callable[[], MutableMapping]:
    """Return a factory of empty mappings of the same kind as ``record``.

    Mutable mappings are copied and cleared, which keeps constructor state
    such as a ``defaultdict``'s default factory. Read-only mappings are built
    as dicts and converted back by ``_same_kind``.
    """
    if isinstance(record, MutableMapping):
        template = copy.copy(record)
        template.clear()
        return lambda: copy.copy(template)
    return dict


def _same_kind(record: Mapping, result: MutableMapping) -> Mapping:
    if isinstance(record, MutableMapping):
        return result
    if isinstance(record, MappingProxyType):
        return MappingProxyType(result)
    return type(record)(result)


def update(
    record: Record, changes: Optional[Mapping[Any, Any]] = None, /, **kwargs: Any
) -> Record:
    """Return a copy of ``record`` with ``changes`` applied.

    Args:
        record: A mapping or a pydantic model. Never modified.
        changes: Key/value pairs to set. Allows non-string keys.
        **kwargs: More key/value pairs; these win over ``changes``.

    Returns:
        A new record of the same kind as ``record``.

    Raises:
        KeyError: If a change targets a field a pydantic model does not declare.
        TypeError: If ``record`` is neither a mapping nor a pydantic model.
    """
    merged_changes = toolz.merge(changes or {}, kwargs)

    if isinstance(record, BaseModel):
        unknown = set(merged_changes) - set(type(record).model_fields)
        if unknown:
            raise KeyError(
                f"{type(record).__name__} has no field(s) {sorted(map(str, unknown))}."
            )
        return record.model_copy(update=merged_changes)

    if isinstance(record, Mapping):
        merged = toolz.merge(record, merged_changes, factory=_factory(record))
        return _same_kind(record, merged)

    raise TypeError(
        f"update expects a mapping or a pydantic model, got {type(record).__name__}."
    )


def update_in(record: Record, path: Sequence[Hashable], value: Any) -> Record:
    """Return a copy of ``record`` with the value at ``path`` replaced.

    Every record along the path is copied; siblings are shared. Missing
    intermediate keys are created as empty mappings of the record's kind.
    Nested pydantic models are followed while the path starts on a model.

    Raises:
        ValueError: If ``path`` is empty.
    """
    if not path:
        raise ValueError("update_in requires a non-empty path.")

    if isinstance(record, BaseModel):
        key, *rest = path
        if not rest:
            return update(record, {key: value})
        child = getattr(record, key) if key in type(record).model_fields else {}
        return update(record, {key: update_in(child, rest, value)})

    if not isinstance(record, Mapping):
        raise TypeError(
            f"update_in expects a mapping or a pydantic model, got {type(record).__name__}."
        )

    updated = toolz.assoc_in(record, list(path), value, factory=_factory(record))
    return _same_kind(record, updated)


def dissoc(record: Mapping, *keys: Hashable) -> Mapping:
    """Return a copy of ``record`` without ``keys``. Absent keys are ignored."""
    if not isinstance(record, Mapping):
        raise TypeError(f"dissoc expects a mapping, got {type(record).__name__}.")
    return _same_kind(record, toolz.dissoc(record, *keys, factory=_factory(record)))


def freeze(obj: Any) -> Any:
    """Recursively convert built-in containers to read-only equivalents.

    dict -> MappingProxyType, list/tuple -> tuple, set -> frozenset. Anything
    else is returned unchanged. Freezing a frozen value is a no-op.
    """
    if isinstance(obj, (dict, MappingProxyType)):
        return MappingProxyType({k: freeze(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return tuple(freeze(v) for v in obj)
    if isinstance(obj, (set, frozenset)):
        return frozenset(obj)
    return obj
