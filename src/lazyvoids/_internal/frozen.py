"""Immutable mapping returned by the map builders."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

KT = TypeVar("KT")
VT = TypeVar("VT")


class FrozenDict(Mapping[KT, VT], Generic[KT, VT]):
    """Read-only, hashable mapping that keeps insertion order.

    Equality follows `Mapping` semantics (order-insensitive, equal to a plain
    dict with the same items). Merging with `|` returns a new FrozenDict;
    the right-hand side wins on shared keys, as with `dict`.
    """

    __slots__ = ("_entries", "_hash")

    def __init__(
        self,
        mapping: Mapping[KT, VT] | Iterable[tuple[KT, VT]] = (),
        /,
        **kwargs: VT,
    ) -> None:
        self._entries: Mapping[KT, VT] = MappingProxyType(dict(mapping, **kwargs))
        self._hash: int | None = None

    def __getitem__(self, key: KT) -> VT:
        return self._entries[key]

    def __iter__(self) -> Iterator[KT]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __hash__(self) -> int:
        # Items are hashed lazily; unhashable values only fail here.
        if self._hash is None:
            self._hash = hash(frozenset(self._entries.items()))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return len(self) == len(other) and all(
            key in other and other[key] == value for key, value in self._entries.items()
        )

    def __or__(self, other: Mapping[KT, VT]) -> FrozenDict[KT, VT]:
        if not isinstance(other, Mapping):
            return NotImplemented
        return type(self)({**self._entries, **other})

    def __ror__(self, other: Mapping[KT, VT]) -> FrozenDict[KT, VT]:
        if not isinstance(other, Mapping):
            return NotImplemented
        return type(self)({**other, **self._entries})

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (dict(self._entries),))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._entries)!r})"

    def to_dict(self) -> dict[KT, VT]:
        """Return a mutable copy of the entries."""
        return dict(self._entries)
