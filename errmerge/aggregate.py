"""Pure aggregation rules — merge, combine, extract.

Every function here treats ``None`` as "no failure", a plain exception as a
single failure and an :class:`~errmerge.errors.AggregateError` as the
ordered list of its constituents.  Results follow three rules:

- nothing collapses to ``None``;
- one failure collapses to that failure, returned as the same object;
- two or more failures become a flat ``AggregateError`` in merge order.
"""

from __future__ import annotations

from typing import Optional

from .errors import AggregateError


def _check(err: object) -> None:
    if not isinstance(err, BaseException):
        raise TypeError(
            f"expected an exception or None, got {type(err).__name__}"
        )


def _constituents(err: BaseException) -> tuple[BaseException, ...]:
    if isinstance(err, AggregateError):
        return err.errors
    return (err,)


def merge(
    current: Optional[BaseException], err: Optional[BaseException]
) -> Optional[BaseException]:
    """Merge *err* into *current* and return the new error state.

    ``None`` on either side returns the other side unchanged.  Otherwise a
    new ``AggregateError`` holds the constituents of *current* followed by
    those of *err*.
    """
    if err is None:
        if current is not None:
            _check(current)
        return current
    _check(err)
    if current is None:
        return err
    _check(current)
    return AggregateError(_constituents(current) + _constituents(err))


append = merge


def combine(*errors: Optional[BaseException]) -> Optional[BaseException]:
    """Reduce *errors* left to right into one error state.

    Same result as folding ``merge`` over the arguments starting from
    ``None``, computed in a single pass.
    """
    present: list[BaseException] = []
    for err in errors:
        if err is None:
            continue
        _check(err)
        present.append(err)

    if not present:
        return None
    if len(present) == 1:
        return present[0]

    flat: list[BaseException] = []
    for err in present:
        flat.extend(_constituents(err))
    return AggregateError(flat)


def extract(err: Optional[BaseException]) -> list[BaseException]:
    """Return the ordered constituents of *err* as a new list.

    ``None`` gives ``[]``; a plain exception gives ``[err]``.
    """
    if err is None:
        return []
    _check(err)
    return list(_constituents(err))
