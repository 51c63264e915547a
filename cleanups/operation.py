"""Adapters turning closeable values into zero-argument cleanup operations.

A batch stores every entry as a plain callable taking no arguments. Values
are converted when they are appended:

- objects with a callable ``close()`` contribute that method;
- other callables are used as they are;
- context managers without ``close()`` contribute ``__exit__(None, None, None)``.
"""

from __future__ import annotations

import functools
import types
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    runtime_checkable,
)

CleanupOperation = Callable[[], Any]


@runtime_checkable
class Closeable(Protocol):
    """Anything that releases its resources through ``close()``."""

    def close(self) -> Any: ...


def as_operation(value: Any) -> Optional[CleanupOperation]:
    """Convert ``value`` into a cleanup operation.

    Args:
        value: A closeable, a zero-argument callable, a context manager, or None.

    Returns:
        The callable to invoke at cleanup time, or None when ``value`` is None.

    Raises:
        TypeError: If ``value`` cannot be turned into an operation.
    """
    if value is None:
        return None

    close = getattr(value, "close", None)
    if callable(close):
        return close

    if callable(value):
        return value

    value_type = type(value)
    if hasattr(value_type, "__enter__") and hasattr(value_type, "__exit__"):
        return functools.partial(value.__exit__, None, None, None)

    raise TypeError(
        f"Cannot use {value_type.__name__!r} as a cleanup operation: "
        "expected a callable, an object with close(), or a context manager."
    )


def iter_operations(values: Iterable[Any]) -> Iterator[CleanupOperation]:
    """Yield an operation for every non-None entry of ``values``, in order.

    Raises:
        TypeError: If ``values`` is None, is not iterable, or holds an entry
            that :func:`as_operation` rejects.
    """
    if values is None:
        raise TypeError("Cleanup operations collection must not be None.")
    for value in values:
        operation = as_operation(value)
        if operation is not None:
            yield operation


def describe(operation: CleanupOperation) -> str:
    """Short human-readable label for an operation, used in log records.

    Never raises: if the operation's own attributes or ``repr`` fail, the
    label falls back to the qualified name of its type.
    """
    try:
        return _label(operation)
    except Exception:
        return type(operation).__qualname__


def _label(operation: CleanupOperation) -> str:
    if isinstance(operation, functools.partial):
        return _label(operation.func)
    name = getattr(operation, "__name__", None)
    if not isinstance(name, str):
        return repr(operation)
    owner = getattr(operation, "__self__", None)
    if owner is None or isinstance(owner, types.ModuleType):
        return getattr(operation, "__qualname__", name)
    return f"{type(owner).__name__}.{name}"
