"""Counting cursor

Source of consecutive integers, bounded or not."""

from __future__ import annotations

from collections.abc import Iterator


class CountCursor(Iterator[int]):
    """Yield 0, 1, 2, ... up to `stop` (exclusive), or forever when `stop` is None."""

    __slots__ = ("_next", "_stop")

    def __init__(self, stop: int | None = None, /) -> None:
        self._next = 0
        self._stop = stop

    def __next__(self) -> int:
        if self._stop is not None and self._next >= self._stop:
            raise StopIteration
        value = self._next
        self._next += 1
        return value


__all__ = ("CountCursor",)
