"""Small building blocks for functional call chains."""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


def identity(value: T) -> T:
    """Return `value` unchanged."""
    return value


class ThrowingRunnable(Protocol):
    """Zero-argument action that may raise any exception."""

    def __call__(self) -> None: ...


class ThrowingSupplier(Protocol[T_co]):
    """Zero-argument producer that may raise any exception."""

    def __call__(self) -> T_co: ...
