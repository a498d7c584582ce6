"""
Seq
===

Lazy, single-pass sequence over any iterable.

A Seq owns exactly one cursor. Every chainable operation returns a new Seq
whose cursor is an adapter over the previous one; nothing runs until a
consumer pulls. A Seq is its own iterator, so it can be passed anywhere an
iterable is expected, including back into Seq.
"""

from __future__ import annotations

import functools
import logging
import operator
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Error, Ok, Result

from ._errors import EmptyReductionError, NotFoundError
from ._helpers import bind_callback, hybridmethod, inverse, same_value_zero
from ._types import Comparator, Item, Predicate, Reducer, SeqCallback
from .cursor import ConcatCursor, CountCursor, FilterCursor, MapCursor, ZipCursor
from .step import Exhausted, Produced, Step

logger = logging.getLogger(__name__)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


# Marks "no initial value" for reduce; None is a valid seed.
_MISSING: typing.Final = _Missing()


def _item_cursor[V](item: Item[V]) -> Iterator[V]:
    """Cursor for a concat argument: a Seq is used as is, anything else is a singleton."""
    if isinstance(item, Seq):
        return item
    return Seq.of(item)


def _concat[V](*items: Item[V]) -> Seq[V]:
    """
    Chain Seqs and bare values into one lazy Seq.

    Bare values (anything that is not a Seq, lists included) count as
    one-element Seqs. Each item's cursor is drained in turn.

    Example:
        Seq.concat(Seq.of(1, 2), 3, Seq.of(4))  # 1, 2, 3, 4
        Seq.of(1).concat(2, 3)                  # 1, 2, 3
    """
    if not items:
        return Seq.empty
    return Seq(ConcatCursor(items, _item_cursor))


class Seq[T](Iterator[T]):
    """
    Lazy sequence wrapper.

    Callbacks have the shape `(value, index, seq)`; declaring fewer
    parameters is fine, e.g. `seq.map(lambda x: x * 2)`.
    The index is the position within the traversal doing the calling.
    """

    __slots__ = ("_cursor",)

    empty: typing.ClassVar[Seq[typing.Never]]

    def __init__(self, iterable: Iterable[T], /) -> None:
        """Take the iterable's cursor. No element is pulled here."""
        self._cursor: Iterator[T] = iter(iterable)

    # Pull contract

    def __next__(self) -> T:
        return next(self._cursor)

    def __iter__(self) -> Seq[T]:
        return self

    def step(self) -> Step[T]:
        """Pull once, reporting the outcome as a value instead of StopIteration."""
        try:
            value = next(self._cursor)
        except StopIteration:
            return Exhausted()
        return Produced(value)

    # Lazy transforms

    def map[U](self, callback: SeqCallback[T, U], /) -> Seq[U]:
        """Apply callback to each element when it is pulled downstream."""
        return Seq(MapCursor(self, bind_callback(callback, max_args=3)))

    def filter(self, predicate: Predicate[T], /) -> Seq[T]:
        """
        Keep elements satisfying the predicate, in order.

        The index passed to the predicate counts dropped elements too.
        """
        return Seq(FilterCursor(self, bind_callback(predicate, max_args=3)))

    def entries(self) -> Seq[tuple[int, T]]:
        return self.map(lambda value, index: (index, value))

    def keys(self) -> Seq[int]:
        return self.map(lambda _, index: index)

    def values(self) -> Seq[T]:
        return self

    concat = hybridmethod(_concat)

    # Draining operations

    def for_each(self, callback: SeqCallback[T, object], /) -> None:
        """Drain the Seq, calling callback for each element."""
        fn = bind_callback(callback, max_args=3)
        for index, value in enumerate(self):
            fn(value, index, self)

    def _locate(self, predicate: Predicate[T]) -> Result[tuple[int, T], NotFoundError]:
        fn = bind_callback(predicate, max_args=3)
        examined = 0
        for index, value in self.entries():
            examined += 1
            if fn(value, index, self):
                return Ok((index, value))
        return Error(NotFoundError(examined))

    @typing.overload
    def find(self, predicate: Predicate[T], /) -> T | None: ...
    @typing.overload
    def find[D](self, predicate: Predicate[T], /, default: D) -> T | D: ...

    def find(self, predicate: Predicate[T], /, default: typing.Any = None) -> typing.Any:
        """First element satisfying the predicate, else `default`. Stops at the match."""
        match self._locate(predicate):
            case Ok((_, value)):
                return value
            case Error(_):
                return default

    def try_find(self, predicate: Predicate[T], /) -> Result[T, NotFoundError]:
        """Like find, but absence is an Error instead of a default."""
        return self._locate(predicate).map(operator.itemgetter(1))

    def find_index(self, predicate: Predicate[T], /) -> int:
        """Index of the first element satisfying the predicate, or -1."""
        match self._locate(predicate):
            case Ok((index, _)):
                return index
            case Error(_):
                return -1

    def every(self, predicate: Predicate[T], /) -> bool:
        """True unless some element fails the predicate. Stops at the first failure."""
        return self.find_index(inverse(bind_callback(predicate, max_args=3))) == -1

    def some(self, predicate: Predicate[T], /) -> bool:
        """True if some element satisfies the predicate. Stops at the first match."""
        return self.find_index(predicate) != -1

    def includes(self, search_element: object, /, from_index: int | None = None) -> bool:
        """
        Membership test where NaN matches NaN.

        Elements before `from_index` are pulled but not compared.
        """
        for index, value in self.entries():
            if (from_index is None or index >= from_index) and same_value_zero(value, search_element):
                return True
        return False

    @typing.overload
    def try_reduce(self, reducer: Reducer[T, T], /) -> Result[T, EmptyReductionError]: ...
    @typing.overload
    def try_reduce[A](self, reducer: Reducer[T, A], initial: A, /) -> Result[A, EmptyReductionError]: ...

    def try_reduce(
        self,
        reducer: Reducer[T, typing.Any],
        initial: typing.Any = _MISSING,
        /,
    ) -> Result[typing.Any, EmptyReductionError]:
        """
        Left fold with `reducer(accumulator, value, index, seq)`.

        Without `initial` the first element seeds the accumulator and folding
        starts at index 1; an empty Seq then gives Error(EmptyReductionError).
        """
        fn = bind_callback(reducer, max_args=4, fallback=2)
        entries = self.entries()

        if initial is _MISSING:
            match entries.step():
                case Produced((_, first)):
                    accumulator = first
                case Exhausted():
                    return Error(EmptyReductionError())
        else:
            accumulator = initial

        for index, value in entries:
            accumulator = fn(accumulator, value, index, self)
        return Ok(accumulator)

    @typing.overload
    def reduce(self, reducer: Reducer[T, T], /) -> T: ...
    @typing.overload
    def reduce[A](self, reducer: Reducer[T, A], initial: A, /) -> A: ...

    def reduce(self, reducer: Reducer[T, typing.Any], initial: typing.Any = _MISSING, /) -> typing.Any:
        """Left fold; raises EmptyReductionError where try_reduce returns it."""
        match self.try_reduce(reducer, initial):
            case Ok(value):
                return value
            case Error(err):
                raise err

    # Eager operations

    def join(self, separator: str = ",", /) -> str:
        """Drain and render elements with `str`; None renders as an empty string."""
        items = list(self)
        logger.debug("join materialized %d elements", len(items))
        return separator.join("" if item is None else str(item) for item in items)

    def __str__(self) -> str:
        return self.join()

    def __repr__(self) -> str:
        return f"Seq({self._cursor!r})"

    def sort(
        self,
        compare: Comparator[T] | None = None,
        /,
        *,
        key: Callable[[T], typing.Any] | None = None,
    ) -> Seq[T]:
        """
        Drain into a list, sort it (stable) and wrap the result.

        `compare` is a three-way comparator returning negative, zero or
        positive; `key` works as in `sorted`. Without either, natural order.
        """
        if compare is not None and key is not None:
            raise ValueError("sort() accepts compare or key, not both")
        items = list(self)
        logger.debug("sort materialized %d elements", len(items))
        items.sort(key=functools.cmp_to_key(compare) if compare is not None else key)
        return Seq(items)

    def reverse(self) -> Seq[T]:
        """Drain into a list and yield it back to front."""
        items = list(self)
        logger.debug("reverse materialized %d elements", len(items))
        items.reverse()
        return Seq(items)

    # Constructors

    @staticmethod
    def of[V](*values: V) -> Seq[V]:
        """Seq over the given values, in order."""
        return Seq(values)

    @staticmethod
    def from_iterable[V](iterable: Iterable[V], /) -> Seq[V]:
        return Seq(iterable)

    @typing.overload
    @staticmethod
    def init(count: int, /) -> Seq[int]: ...
    @typing.overload
    @staticmethod
    def init[V](count: int, initializer: SeqCallback[int, V], /) -> Seq[V]: ...

    @staticmethod
    def init(count: int, initializer: SeqCallback[int, typing.Any] | None = None, /) -> Seq[typing.Any]:
        """
        Lazy Seq of 0 .. count-1, each optionally passed through initializer.

        The value and the index handed to initializer coincide.
        """
        count = operator.index(count)
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        seq = Seq(CountCursor(count))
        return seq.map(initializer) if initializer is not None else seq

    @typing.overload
    @staticmethod
    def init_infinite() -> Seq[int]: ...
    @typing.overload
    @staticmethod
    def init_infinite[V](initializer: SeqCallback[int, V], /) -> Seq[V]: ...

    @staticmethod
    def init_infinite(initializer: SeqCallback[int, typing.Any] | None = None, /) -> Seq[typing.Any]:
        """
        Unbounded lazy Seq of 0, 1, 2, ...

        Never exhausts; pair it with find, find_index, some or every.
        """
        seq = Seq(CountCursor())
        return seq.map(initializer) if initializer is not None else seq

    @staticmethod
    def zip[A, B](source1: Iterable[A], source2: Iterable[B], /) -> Seq[tuple[A, B]]:
        """Pairs from both sources, truncated to the shorter one."""
        return Seq(ZipCursor(iter(source1), iter(source2)))


Seq.empty = Seq(())


__all__ = ("Seq",)
