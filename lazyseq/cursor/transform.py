"""
Transform cursors
=================

Adapters that rewrite or drop elements of a single upstream cursor.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator


class MapCursor[T, U](Iterator[U]):
    """
    Apply `func(value, index, source)` to each element as it is pulled.

    The index counts produced elements only, starting at 0.
    A StopIteration escaping func ends the cursor and surfaces as RuntimeError,
    as it would from a generator.
    """

    __slots__ = ("_source", "_func", "_index", "_done")

    def __init__(self, source: Iterator[T], func: Callable[[T, int, Iterator[T]], U], /) -> None:
        self._source = source
        self._func = func
        self._index = 0
        self._done = False

    def __next__(self) -> U:
        if self._done:
            raise StopIteration
        try:
            value = next(self._source)
        except StopIteration:
            self._done = True
            raise
        index = self._index
        self._index += 1
        try:
            return self._func(value, index, self._source)
        except StopIteration as exc:
            self._done = True
            raise RuntimeError("map callback raised StopIteration") from exc


class FilterCursor[T](Iterator[T]):
    """
    Yield the elements for which `predicate(value, index, source)` holds.

    The index counts every examined element, kept or dropped.
    A StopIteration escaping the predicate is reported as RuntimeError.
    """

    __slots__ = ("_source", "_predicate", "_index", "_done")

    def __init__(self, source: Iterator[T], predicate: Callable[[T, int, Iterator[T]], typing.Any], /) -> None:
        self._source = source
        self._predicate = predicate
        self._index = 0
        self._done = False

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        for value in self._source:
            index = self._index
            self._index += 1
            try:
                keep = self._predicate(value, index, self._source)
            except StopIteration as exc:
                self._done = True
                raise RuntimeError("filter predicate raised StopIteration") from exc
            if keep:
                return value
        self._done = True
        raise StopIteration


__all__ = ("MapCursor", "FilterCursor")
