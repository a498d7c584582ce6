"""Internal helpers for lazyseq.

Small functions shared by the Seq class and the cursor adapters.
These are not part of the public API."""

from __future__ import annotations

import functools
import inspect
import math
import typing
from collections.abc import Callable

# Predicate inversion
def inverse(func: Callable[..., typing.Any], /) -> Callable[..., bool]:
    """
    Negate a predicate, passing every argument through positionally.

    Usage:
        is_odd = inverse(lambda x: x % 2 == 0)
        is_odd(3)  # True
    """

    def inverted(*args: typing.Any) -> bool:
        return not func(*args)

    return inverted

# Value identity
def same_value_zero(x: object, y: object, /) -> bool:
    """
    Equality where NaN matches NaN.

    Plain `==` says `nan != nan`; membership tests need the opposite.
    """
    if x is y or x == y:
        return True
    return isinstance(x, float) and isinstance(y, float) and math.isnan(x) and math.isnan(y)

# Callback arity
def _positional_arity(func: Callable[..., typing.Any], limit: int, fallback: int) -> int:
    # Classes and C builtins often take optional positionals (str, int, round)
    # that must not receive the index.
    if isinstance(func, type) or inspect.isbuiltin(func):
        return fallback
    try:
        signature = inspect.signature(func)
    except (ValueError, TypeError):
        return fallback

    count = 0
    for param in signature.parameters.values():
        match param.kind:
            case inspect.Parameter.VAR_POSITIONAL:
                return limit
            case inspect.Parameter.POSITIONAL_ONLY | inspect.Parameter.POSITIONAL_OR_KEYWORD:
                count += 1
            case _:
                pass
    return min(count, limit)

def bind_callback[R](
    func: Callable[..., R],
    /,
    *,
    max_args: int,
    fallback: int = 1,
) -> Callable[..., R]:
    """
    Adapt a callback to receive only the leading arguments it declares.

    The engine always calls with `max_args` arguments, e.g. (value, index, seq).
    A `lambda x: ...` gets just the value, `lambda x, i: ...` value and index.
    Classes, C builtins and uninspectable callables get `fallback` arguments.

    Inspection happens once, when the operation is built.
    """
    arity = _positional_arity(func, max_args, fallback)
    if arity >= max_args:
        return func

    def bound(*args: typing.Any) -> R:
        return func(*args[:arity])

    return bound

# Class-or-instance dispatch
class hybridmethod[F: Callable[..., typing.Any]]:
    """
    Function reachable from the class and from its instances.

    `Cls.name(a, b)` calls `func(a, b)`; `obj.name(a, b)` calls `func(obj, a, b)`.
    """

    def __init__(self, func: F, /) -> None:
        self._func = func
        functools.update_wrapper(self, func)

    def __get__(self, instance: object | None, owner: type | None = None) -> Callable[..., typing.Any]:
        if instance is None:
            return self._func
        return functools.partial(self._func, instance)

__all__ = (
    "inverse",
    "same_value_zero",
    "bind_callback",
    "hybridmethod",
)
