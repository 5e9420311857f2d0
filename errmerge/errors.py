"""Error types: the aggregate value and the invalid-destination signal."""

from __future__ import annotations

from typing import Iterable, Iterator


class InvalidDestinationError(TypeError):
    """``append_into`` was handed something that cannot hold an error.

    This is a caller bug (typically ``None`` where an ``ErrorSlot`` was
    expected).  It is raised before anything is mutated and is never
    recorded as a constituent.
    """


class AggregateError(Exception):
    """Two or more failures reported as one.

    ``errors`` is the ordered, flattened tuple of constituents.  Aggregates
    passed in are spliced into place, so an ``AggregateError`` never
    contains another one.  Fewer than two constituents is rejected: zero
    failures is ``None`` and a single failure is reported as itself.

    Build these through ``merge`` / ``combine`` rather than directly.
    """

    def __init__(self, errors: Iterable[BaseException]) -> None:
        flat: list[BaseException] = []
        for err in errors:
            if isinstance(err, AggregateError):
                flat.extend(err.errors)
            elif isinstance(err, BaseException):
                flat.append(err)
            else:
                raise TypeError(
                    f"AggregateError constituents must be exceptions, "
                    f"got {type(err).__name__}"
                )
        if len(flat) < 2:
            raise ValueError(
                f"AggregateError requires at least two errors, got {len(flat)}; "
                "use combine() to collapse zero or one error."
            )
        self._errors: tuple[BaseException, ...] = tuple(flat)
        super().__init__(self._errors)

    @property
    def errors(self) -> tuple[BaseException, ...]:
        return self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)

    def __str__(self) -> str:
        return "; ".join(_describe(err) for err in self._errors)

    def __repr__(self) -> str:
        return f"AggregateError({list(self._errors)!r})"

    def format_verbose(self) -> str:
        """Multi-line rendering, one constituent per line."""
        lines = ["the following errors occurred:"]
        lines.extend(f" -  {_describe(err)}" for err in self._errors)
        return "\n".join(lines)

    def to_exception_group(self, message: str | None = None) -> BaseExceptionGroup:
        """Return the constituents as an exception group usable with ``except*``.

        ``BaseExceptionGroup`` narrows itself to ``ExceptionGroup`` when every
        constituent is an ``Exception``.
        """
        if message is None:
            message = f"{len(self._errors)} errors occurred"
        return BaseExceptionGroup(message, list(self._errors))


def _describe(err: BaseException) -> str:
    return str(err) or type(err).__name__
