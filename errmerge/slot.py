"""ErrorSlot — a mutable error variable, plus the helpers that append into one.

Usage::

    slot = ErrorSlot()
    append_into(slot, op1())
    append_into(slot, op2())
    append_func_into(slot, conn.close)
    if slot.error is not None:
        raise slot.error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .aggregate import merge
from .errors import InvalidDestinationError
from .protocol import ErrorFunc, SlotProtocol


@dataclass
class ErrorSlot:
    """Holds the error state built up by ``append_into``.

    ``error`` is ``None``, a single exception, or an ``AggregateError``.
    """

    error: Optional[BaseException] = None


def _require_slot(slot: object) -> None:
    if not isinstance(slot, SlotProtocol):
        raise InvalidDestinationError(
            f"append destination must have an 'error' attribute "
            f"(e.g. ErrorSlot), got {type(slot).__name__}"
        )


def append_into(slot: SlotProtocol, err: Optional[BaseException]) -> bool:
    """Merge *err* into ``slot.error``.

    Returns ``True`` if *err* was an error and ``False`` if it was ``None``
    (the slot is then left alone).  Raises ``InvalidDestinationError`` for a
    missing or unusable *slot* before anything is changed.
    """
    _require_slot(slot)
    if err is None:
        return False
    slot.error = merge(slot.error, err)
    return True


def append_func_into(slot: SlotProtocol, fn: ErrorFunc) -> bool:
    """Call *fn* and merge what it returns into ``slot.error``.

    The slot is validated before *fn* runs.  Exceptions raised by *fn*
    propagate unchanged and leave the slot as it was.
    """
    _require_slot(slot)
    return append_into(slot, fn())
