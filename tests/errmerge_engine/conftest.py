"""Shared fixtures and reusable dummy failures for errmerge tests."""

from __future__ import annotations

import pytest

from errmerge import Collector, ErrorSlot

# ---------------------------------------------------------------------------
# Reusable dummy callables
# ---------------------------------------------------------------------------


class Closer:
    """Close-like callable: returns *err* (or None) and counts its calls."""

    def __init__(self, err: BaseException | None = None):
        self.err = err
        self.calls = 0

    def __call__(self) -> BaseException | None:
        self.calls += 1
        return self.err


class Panics:
    """Raises instead of returning a failure."""

    def __init__(self, exc: BaseException | None = None):
        self.exc = exc or RuntimeError("panic")

    def __call__(self) -> BaseException | None:
        raise self.exc


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def err_a():
    return ValueError("a")


@pytest.fixture
def err_b():
    return OSError("b")


@pytest.fixture
def err_c():
    return KeyError("c")


@pytest.fixture
def slot():
    return ErrorSlot()


@pytest.fixture
def collector():
    return Collector(name="test")
