"""Structural protocol for error destinations and the fallible-callable alias."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable


ErrorFunc = Callable[[], Optional[BaseException]]
"""Zero-argument operation that reports failure by *returning* an exception.

Typical examples are close/cleanup helpers that return ``None`` on success.
An exception *raised* by such a function is not a reported failure; it
propagates through every ``append_func*`` helper untouched.
"""


@runtime_checkable
class SlotProtocol(Protocol):
    """Anything with a readable and writable ``error`` attribute.

    ``@runtime_checkable`` lets ``append_into`` use
    ``isinstance(slot, SlotProtocol)`` to reject ``None`` and other
    unusable destinations before touching them.
    """

    error: Optional[BaseException]
