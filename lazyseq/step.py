"""
Step - outcome of a single pull
===============================
"""

from __future__ import annotations

import typing


class Produced[T]:
    """A pull that yielded a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @property
    def value(self) -> T:
        """The produced element."""
        return self._value

    @property
    def done(self) -> typing.Literal[False]:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Produced) and other._value == self._value

    def __hash__(self) -> int:
        return hash((Produced, self._value))

    def __repr__(self) -> str:
        return f"Produced({self._value!r})"


class Exhausted:
    """A pull that found the cursor spent. There is exactly one instance."""

    __slots__ = ()

    _instance: typing.ClassVar[Exhausted | None] = None

    def __new__(cls) -> Exhausted:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def done(self) -> typing.Literal[True]:
        return True

    def __repr__(self) -> str:
        return "Exhausted()"


type Step[T] = Produced[T] | Exhausted


__all__ = ("Produced", "Exhausted", "Step")
