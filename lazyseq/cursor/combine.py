"""
Combining cursors
=================

Adapters owning several upstream cursors.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator


class ConcatCursor[T, I](Iterator[T]):
    """
    Drain each item's cursor in turn.

    `resolve` turns an item into its cursor; it runs only when the
    previous item is spent, so later items stay untouched until needed.
    """

    __slots__ = ("_items", "_resolve", "_current", "_done")

    def __init__(self, items: Iterable[I], resolve: Callable[[I], Iterator[T]], /) -> None:
        self._items = iter(items)
        self._resolve = resolve
        self._current: Iterator[T] | None = None
        self._done = False

    def __next__(self) -> T:
        while not self._done:
            if self._current is None:
                try:
                    item = next(self._items)
                except StopIteration:
                    self._done = True
                    break
                self._current = self._resolve(item)
            try:
                return next(self._current)
            except StopIteration:
                self._current = None
        raise StopIteration


class ZipCursor[A, B](Iterator[tuple[A, B]]):
    """
    Pair elements of two cursors, stopping with the shorter one.

    The second cursor is not pulled once the first is spent.
    """

    __slots__ = ("_first", "_second", "_done")

    def __init__(self, first: Iterator[A], second: Iterator[B], /) -> None:
        self._first = first
        self._second = second
        self._done = False

    def __next__(self) -> tuple[A, B]:
        if self._done:
            raise StopIteration
        try:
            a = next(self._first)
            b = next(self._second)
        except StopIteration:
            self._done = True
            raise
        return (a, b)


__all__ = ("ConcatCursor", "ZipCursor")
