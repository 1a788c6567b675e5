"""Iterator factories with descriptive names.

    >>> from lazyvoids.streams import stream, reverse_stream
    >>> list(stream(1, 2, 3))
    [1, 2, 3]
    >>> list(reverse_stream([1, 2, 3]))
    [3, 2, 1]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def _is_single_iterable(elements: tuple[Any, ...]) -> bool:
    # Strings and bytes are treated as one element, not as characters.
    return (
        len(elements) == 1
        and isinstance(elements[0], Iterable)
        and not isinstance(elements[0], (str, bytes, bytearray))
    )


def stream(*elements: Any) -> Iterator[Any]:
    """Iterate over the given elements.

    With no arguments the iterator is empty. A single iterable argument is
    iterated itself; any other arguments are iterated in order.
    """
    if _is_single_iterable(elements):
        return iter(elements[0])
    return iter(elements)


def reverse_stream(*elements: Any) -> Iterator[Any]:
    """Iterate over the given elements in reverse order.

    A single sequence argument is reversed itself; iterables that are not
    sequences are materialized first.
    """
    if _is_single_iterable(elements):
        source = elements[0]
        if not isinstance(source, Sequence):
            source = list(source)
        return reversed(source)
    return reversed(elements)


def key_stream(mapping: Mapping[K, Any]) -> Iterator[K]:
    """Iterate over the keys of `mapping`."""
    return iter(mapping.keys())


def value_stream(mapping: Mapping[Any, V]) -> Iterator[V]:
    """Iterate over the values of `mapping`."""
    return iter(mapping.values())
