"""Collector — stateful accumulator of failures for one logical operation."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from .aggregate import extract, merge
from .protocol import ErrorFunc

logger = logging.getLogger(__name__)


class Collector:
    """Accumulates non-``None`` errors and exposes them as one error value.

    Build one per unit of work::

        c = Collector(name="shutdown")
        c.append(op1())
        c.append_func(conn.close)
        c.raise_if_failed()

    ``result()`` is ``None`` until something fails, then the single failure
    itself, then an ``AggregateError`` holding every failure in append
    order.  Values handed out are immutable; ``reset()`` never affects them.

    Not safe for concurrent use.  Give each worker its own Collector and
    ``combine()`` their results once all of them have finished, or use
    :class:`SynchronizedCollector`.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self._err: Optional[BaseException] = None
        self._count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, size={self._count})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, err: Optional[BaseException]) -> None:
        """Add *err*.  ``None`` is a no-op.

        An ``AggregateError`` counts once per constituent, so ``size()``
        always equals ``len(snapshot())``.
        """
        if err is None:
            return
        self._err = merge(self._err, err)
        self._count += len(extract(err))
        logger.debug(
            "Collector %r recorded %s (%d so far)",
            self.name,
            type(err).__name__,
            self._count,
        )

    def append_func(self, fn: ErrorFunc) -> None:
        """Equivalent to ``append(fn())``.

        No recovery boundary: if *fn* raises, the exception propagates and
        the collector is unchanged.
        """
        self.append(fn())

    def reset(self) -> None:
        """Return to the freshly created state."""
        if self._count:
            logger.debug(
                "Collector %r reset, discarding %d failure(s)", self.name, self._count
            )
        self._err = None
        self._count = 0

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def result(self) -> Optional[BaseException]:
        return self._err

    def size(self) -> int:
        """Number of failures collected since creation or reset."""
        return self._count

    def has_failures(self) -> bool:
        return self.size() > 0

    def snapshot(self) -> list[BaseException]:
        """Every collected failure in append order, as a new list."""
        return extract(self.result())

    def raise_if_failed(self) -> None:
        """Raise ``result()`` if anything was collected.

        A lone failure is raised as itself, several as an ``AggregateError``.
        The collected state is kept.
        """
        err = self.result()
        if err is not None:
            raise err


class SynchronizedCollector(Collector):
    """``Collector`` with every read and mutation guarded by one lock.

    ``append_func`` runs the callable outside the lock so slow cleanups in
    one thread do not block appends from the others.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name=name)
        self._lock = threading.Lock()

    def append(self, err: Optional[BaseException]) -> None:
        with self._lock:
            super().append(err)

    def append_func(self, fn: ErrorFunc) -> None:
        err = fn()
        self.append(err)

    def reset(self) -> None:
        with self._lock:
            super().reset()

    def result(self) -> Optional[BaseException]:
        with self._lock:
            return self._err

    def size(self) -> int:
        with self._lock:
            return self._count
