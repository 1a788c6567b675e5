"""Convert arbitrary exceptions into a single runtime error type.

Useful at call sites that cannot sensibly handle the many exception types a
callable may raise but still want one predictable type to catch upstream:

    >>> from lazyvoids.throwables import RuntimeThrowable, runtime_throws
    >>> try:
    ...     runtime_throws(lambda: int("nope"))
    ... except RuntimeThrowable as err:
    ...     isinstance(err.throwable, ValueError)
    True
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import structlog

from lazyvoids.functions import ThrowingRunnable, ThrowingSupplier

logger = structlog.get_logger()

T = TypeVar("T")
P = ParamSpec("P")


class RuntimeThrowable(RuntimeError):
    """Runtime error standing in for another exception.

    The wrapped exception is available as `throwable` and `__cause__`. The
    message, traceback and any attribute the wrapper lacks are taken from
    the wrapped exception.
    """

    def __init__(self, throwable: BaseException) -> None:
        super().__init__(*throwable.args)
        self.throwable = throwable
        self.__cause__ = throwable
        self.__traceback__ = throwable.__traceback__

    def __str__(self) -> str:
        return str(self.throwable)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.throwable!r})"

    def __getattr__(self, name: str) -> Any:
        if name == "throwable":
            raise AttributeError(name)
        return getattr(self.throwable, name)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.throwable,))


def _convert(exc: Exception) -> RuntimeThrowable:
    if isinstance(exc, RuntimeThrowable):
        return exc
    logger.debug(
        "exception_converted",
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return RuntimeThrowable(exc)


def runtime_throws(func: ThrowingSupplier[T] | ThrowingRunnable) -> T:
    """Call `func` and convert anything it raises into `RuntimeThrowable`.

    Only `Exception` subclasses are converted; `KeyboardInterrupt`,
    `SystemExit` and other `BaseException` subclasses propagate unchanged.

    Returns:
        Whatever `func` returns (None for runnables).

    Raises:
        RuntimeThrowable: If `func` raises an exception.
    """
    try:
        return func()  # type: ignore[return-value]
    except Exception as exc:
        converted = _convert(exc)
        if converted is exc:
            raise
        raise converted.with_traceback(exc.__traceback__) from exc


def runtime_throwing(func: Callable[P, T]) -> Callable[P, T]:
    """Decorate `func` so every call goes through `runtime_throws`."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        return runtime_throws(lambda: func(*args, **kwargs))

    return wrapper
