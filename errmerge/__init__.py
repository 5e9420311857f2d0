"""Aggregate several failures into one error value without losing any of them.

Public surface::

    from errmerge import (
        AggregateError,
        InvalidDestinationError,
        merge,
        append,
        combine,
        extract,
        ErrorSlot,
        append_into,
        append_func_into,
        SlotProtocol,
        ErrorFunc,
        Collector,
        SynchronizedCollector,
    )
"""

from .aggregate import append, combine, extract, merge
from .collector import Collector, SynchronizedCollector
from .errors import AggregateError, InvalidDestinationError
from .protocol import ErrorFunc, SlotProtocol
from .slot import ErrorSlot, append_func_into, append_into

__all__ = [
    "AggregateError",
    "InvalidDestinationError",
    "merge",
    "append",
    "combine",
    "extract",
    "ErrorSlot",
    "append_into",
    "append_func_into",
    "SlotProtocol",
    "ErrorFunc",
    "Collector",
    "SynchronizedCollector",
]
