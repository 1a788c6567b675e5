"""Pseudo-random number helpers.

`PseudoRandom` is an explicit, seedable generator. The module-level functions
delegate to a process-wide default instance for quick scripts:

    >>> from lazyvoids import rng
    >>> rng.seed(42)
    >>> 0 <= rng.random_int(10) < 10
    True

None of this is suitable for security-sensitive use; see `secrets` for that.
"""

from __future__ import annotations

import itertools
import random as _random
from collections.abc import Collection, Sequence
from typing import TypeVar, overload

import structlog

logger = structlog.get_logger()

T = TypeVar("T")


class PseudoRandom:
    """Seedable pseudo-random number source.

    Example:
        >>> a, b = PseudoRandom(seed=7), PseudoRandom(seed=7)
        >>> a.random_int(1, 100) == b.random_int(1, 100)
        True
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the generator.

        Args:
            seed: Seed for reproducible sequences. None seeds from the OS.
        """
        self._random = _random.Random(seed)

    def seed(self, value: int | None) -> None:
        """Reseed the generator."""
        self._random.seed(value)
        logger.debug("rng_seeded", seed=value)

    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self._random.random()

    def random_float(self, bound: float) -> float:
        """Return a float in [0.0, bound)."""
        return self.random() * bound

    @overload
    def random_int(self, bound: int, /) -> int: ...

    @overload
    def random_int(self, lower: int, upper: int, /) -> int: ...

    def random_int(self, lower: int, upper: int | None = None, /) -> int:
        """Return an int in [0, bound) or, given two arguments, [lower, upper).

        Raises:
            ValueError: If the range is empty.
        """
        if upper is None:
            lower, upper = 0, lower
        if upper <= lower:
            msg = f"Empty range [{lower}, {upper})"
            raise ValueError(msg)
        return self._random.randrange(lower, upper)

    def random_inclusive(self, lower: int, upper: int) -> int:
        """Return an int in [lower, upper]."""
        return self.random_int(lower, upper + 1)

    def roll(self, chance: int) -> bool:
        """Roll a 1-in-`chance` event.

        Returns:
            True if a number drawn from [0, chance) is zero.

        Raises:
            ValueError: If `chance` is not positive.
        """
        if chance <= 0:
            msg = f"chance must be positive, got {chance}"
            raise ValueError(msg)
        return self.random_int(chance) == 0

    def random_element(self, collection: Collection[T]) -> T:
        """Return a uniformly chosen element of `collection`.

        Raises:
            IndexError: If the collection is empty.
        """
        size = len(collection)
        if size == 0:
            raise IndexError("Cannot choose from an empty collection")
        index = self.random_int(size)
        if isinstance(collection, Sequence):
            return collection[index]
        return next(itertools.islice(collection, index, None))


_default = PseudoRandom()


def default_generator() -> PseudoRandom:
    """Return the process-wide generator used by the module functions."""
    return _default


def seed(value: int | None) -> None:
    """Reseed the process-wide generator."""
    _default.seed(value)


def random() -> float:
    """Return a float in [0.0, 1.0)."""
    return _default.random()


def random_float(bound: float) -> float:
    """Return a float in [0.0, bound)."""
    return _default.random_float(bound)


@overload
def random_int(bound: int, /) -> int: ...


@overload
def random_int(lower: int, upper: int, /) -> int: ...


def random_int(lower: int, upper: int | None = None, /) -> int:
    """Return an int in [0, bound) or, given two arguments, [lower, upper)."""
    if upper is None:
        return _default.random_int(lower)
    return _default.random_int(lower, upper)


def random_inclusive(lower: int, upper: int) -> int:
    """Return an int in [lower, upper]."""
    return _default.random_inclusive(lower, upper)


def roll(chance: int) -> bool:
    """Roll a 1-in-`chance` event on the process-wide generator."""
    return _default.roll(chance)


def random_element(collection: Collection[T]) -> T:
    """Return a uniformly chosen element of `collection`."""
    return _default.random_element(collection)
