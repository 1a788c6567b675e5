"""Key-value match resolver.

`When` replaces an if/elif ladder that picks one value for one key:

    >>> from lazyvoids import when
    >>> when("b").match("a", 1).match("b", 2).match("c", 3).get()
    2

Every `match` compares its candidate key against the original key, not
against whether an earlier call already matched. Repeating an equal key
therefore overwrites the result (the last equal match wins):

    >>> when("a").match("a", 1).match("a", 2).get()
    2
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar, cast

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


class _Absent:
    """Marker for a result no `match` call has set yet."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<absent>"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


@dataclass(frozen=True, slots=True)
class When(Generic[K, V]):
    """Immutable pairing of a fixed key with an optional matched result.

    Instances are created with `when(key)` and refined with `match`. A match
    that misses returns the same instance; a hit returns a new one. Equality
    and hashing are structural over `(key, result)`.

    The terminal operations mirror an optional value: `is_present`,
    `is_empty`, `get`, `if_present`, `or_else`, `or_else_get` and
    `or_else_raise`.
    """

    key: K
    result: V | _Absent = ABSENT

    def match(self, key: K, value: T) -> When[K, T]:
        """Offer a candidate key-value pair.

        Args:
            key: Candidate key, compared to this resolver's key with `==`.
            value: Result to hold if the candidate key is equal.

        Returns:
            A new resolver holding `value` if the keys are equal (even when a
            result is already present), otherwise `self`.
        """
        if self.key == key:
            return When(self.key, value)
        return cast("When[K, T]", self)

    def is_present(self) -> bool:
        """Return True if some `match` call has set a result."""
        return self.result is not ABSENT

    def is_empty(self) -> bool:
        """Return True if no `match` call has set a result."""
        return not self.is_present()

    def get(self) -> V | None:
        """Return the result, or None if no key matched."""
        if self.result is ABSENT:
            return None
        return cast(V, self.result)

    def if_present(self, action: Callable[[V], Any]) -> None:
        """Call `action` with the result if one is present."""
        if self.is_present():
            action(cast(V, self.result))

    def or_else(self, other: V) -> V:
        """Return the result if present, otherwise `other`."""
        return cast(V, self.result) if self.is_present() else other

    def or_else_get(self, supplier: Callable[[], V]) -> V:
        """Return the result if present, otherwise the value of `supplier()`.

        The supplier is only called when no result is present.
        """
        return cast(V, self.result) if self.is_present() else supplier()

    def or_else_raise(self, exc_supplier: Callable[[], BaseException]) -> V:
        """Return the result if present, otherwise raise `exc_supplier()`.

        Raises:
            BaseException: Whatever the supplier produces, when no result is
                present. The supplier is never called on a present result.
        """
        if self.is_empty():
            raise exc_supplier()
        return cast(V, self.result)

    def __bool__(self) -> bool:
        return self.is_present()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, result={self.result!r})"


def when(key: K) -> When[K, Any]:
    """Create a resolver for `key` with no result.

    Example:
        >>> label = (
        ...     when(status)
        ...     .match(200, "ok")
        ...     .match(404, "missing")
        ...     .or_else("unknown")
        ... )
    """
    return When(key)
