"""Tests for turning values into cleanup operations."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest

from cleanups.operation import Closeable, as_operation, describe, iter_operations


class _Resource:
    def __init__(self) -> None:
        self.closed = 0

    def close(self) -> None:
        self.closed += 1


class _Guard:
    """Context manager without close()."""

    def __init__(self) -> None:
        self.exits = []

    def __enter__(self) -> _Guard:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.exits.append((exc_type, exc_value, traceback))
        return False


class _CallableWithClose:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self) -> None:
        self.calls.append("call")

    def close(self) -> None:
        self.calls.append("close")


def _noop() -> None:
    return None


def test_none_maps_to_none():
    assert as_operation(None) is None


def test_closeable_contributes_its_close_method():
    resource = _Resource()

    operation = as_operation(resource)
    operation()

    assert resource.closed == 1
    assert isinstance(resource, Closeable)


def test_callable_is_used_unchanged():
    assert as_operation(_noop) is _noop


def test_close_wins_over_call():
    target = _CallableWithClose()

    as_operation(target)()

    assert target.calls == ["close"]


def test_context_manager_exits_cleanly():
    guard = _Guard()

    as_operation(guard)()

    assert guard.exits == [(None, None, None)]


@pytest.mark.parametrize("value", [42, "text", object()])
def test_unusable_values_are_rejected(value):
    with pytest.raises(TypeError, match="cleanup operation"):
        as_operation(value)


def test_iter_operations_skips_none_and_keeps_order():
    first = MagicMock(spec=["close"])
    second = MagicMock(spec=["close"])

    operations = list(iter_operations([first, None, _noop, None, second]))

    assert operations == [first.close, _noop, second.close]


def test_iter_operations_rejects_none_collection():
    with pytest.raises(TypeError, match="must not be None"):
        list(iter_operations(None))


def test_describe_labels():
    assert describe(io.StringIO().close) == "StringIO.close"
    assert describe(_Resource().close) == "_Resource.close"
    assert describe(_noop) == "_noop"
    assert describe(as_operation(_Guard())) == "_Guard.__exit__"
    assert "<lambda>" in describe(lambda: None)
    assert describe(len) == "len"


class _BrokenRepr:
    def __call__(self) -> None:
        return None

    def __repr__(self) -> str:
        raise RuntimeError("repr broken")


def test_describe_never_raises():
    assert describe(_BrokenRepr()) == "_BrokenRepr"
