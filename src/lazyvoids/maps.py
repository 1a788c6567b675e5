"""Builders for small immutable maps.

Keys and values are passed inline, alternating:

    >>> from lazyvoids.maps import map_of
    >>> map_of("a", 1, "b", 2)
    FrozenDict({'a': 1, 'b': 2})

Builders reject duplicate keys instead of silently keeping the last value.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from enum import Enum
from typing import Any, TypeVar

from lazyvoids._internal.frozen import FrozenDict

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
E = TypeVar("E", bound=Enum)


class MapBuildError(ValueError):
    """Raised when key-value arguments cannot form a map."""


def map_of_pairs(pairs: Iterable[tuple[K, V]]) -> FrozenDict[K, V]:
    """Build an immutable map from `(key, value)` pairs.

    Raises:
        MapBuildError: If a key appears more than once.
    """
    data: dict[K, V] = {}
    for key, value in pairs:
        if key in data:
            msg = f"Duplicate key {key!r}: already mapped to {data[key]!r}, got {value!r}"
            raise MapBuildError(msg)
        data[key] = value
    return FrozenDict(data)


def map_of(*keys_and_values: Any) -> FrozenDict[Any, Any]:
    """Build an immutable map from alternating keys and values.

    Example:
        >>> codes = map_of(200, "ok", 404, "missing")

    Raises:
        MapBuildError: If an odd number of arguments is given, or a key
            appears more than once.
    """
    if len(keys_and_values) % 2:
        msg = (
            f"map_of() takes alternating keys and values, "
            f"got {len(keys_and_values)} arguments"
        )
        raise MapBuildError(msg)
    return map_of_pairs(zip(keys_and_values[::2], keys_and_values[1::2], strict=True))


def enum_entry_map(enum_type: type[E], key_function: Callable[[E], K]) -> FrozenDict[K, E]:
    """Map `key_function(member)` to each member of `enum_type`.

    Example:
        >>> class Color(Enum):
        ...     RED = "r"
        ...     GREEN = "g"
        >>> enum_entry_map(Color, lambda c: c.value)["g"]
        <Color.GREEN: 'g'>

    Raises:
        MapBuildError: If two members produce the same key.
    """
    return map_of_pairs((key_function(member), member) for member in enum_type)
