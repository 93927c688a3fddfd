##############################################################################
# Options
# ============================================================================
#
# "Is there something here, even if that something is `None`?" comes up any
# time we look a key up in a host object, because `None` is a perfectly good
# value to store. Rather than pass a marker object around and compare against
# it, lookups return `Some(value)` or `Nada()`.
#
##############################################################################

from __future__ import annotations
from typing import Any, Generic, TypeVar, final


T = TypeVar("T")
V = TypeVar("V")


@final
class Nada(Generic[T]):
    """Nothing at all, not even `None`.

    >>> Nada() == Nada()
    True
    >>> bool(Nada())
    False
    >>> Nada().unwrap()
    Traceback (most recent call last):
        ...
    AttributeError: Nothing here
    """

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nada()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nada)

    def __hash__(self) -> int:
        return hash(Nada)

    def unwrap(self) -> T:
        raise AttributeError("Nothing here")

    def unwrap_or(self, default: V) -> T | V:
        return default


@final
class Some(Generic[T]):
    """A value that is definitely there, `None` included.

    >>> Some(None) == Some(None)
    True
    >>> Some(None) == Nada()
    False
    >>> Some(None).unwrap() is None
    True
    """

    __slots__ = ("_value",)

    _value: T

    def __init__(self, value: T):
        self._value = value

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and other._value == self._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: Any) -> T:
        return self._value


Option = Some[T] | Nada[T]


if __name__ == "__main__":
    import doctest

    doctest.testmod()
