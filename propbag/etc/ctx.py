from __future__ import annotations
from typing import (
    Callable,
    Generic,
    ParamSpec,
    TypeVar,
)
from contextvars import ContextVar, Token


T = TypeVar("T")
TParams = ParamSpec("TParams")


class ScopedValue(Generic[T]):
    """Context manager that sets a `ContextVar` on enter and puts the previous
    value back on exit. Single use.
    """

    __slots__ = ("_var", "_value", "_token")

    _var: ContextVar[T]
    _value: T
    _token: Token[T] | None

    def __init__(self, var: ContextVar[T], value: T):
        self._var = var
        self._value = value
        self._token = None

    @property
    def value(self) -> T:
        return self._value

    def __enter__(self) -> T:
        if self._token is not None:
            raise RuntimeError("can not re-enter context")

        self._token = self._var.set(self._value)

        return self._value

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if self._token is None:
            raise RuntimeError("can not __exit__ without __enter__ first")

        self._var.reset(self._token)
        self._token = None


class ContextVarManager(Generic[TParams, T]):
    """Owns a `ContextVar` and hands out `ScopedValue` managers for it.

    Calling the manager runs `constructor` with the call's arguments to build
    the value for the scope.

    >>> names = ContextVarManager("names", lambda *n: n, default=())
    >>> with names("a", "b"):
    ...     names.get()
    ('a', 'b')
    >>> names.get()
    ()
    """

    _constructor: Callable[TParams, T]
    _var: ContextVar[T]
    _default: T

    def __init__(
        self,
        name: str,
        constructor: Callable[TParams, T],
        default: T,
    ):
        self._constructor = constructor
        self._var = ContextVar(name, default=default)
        self._default = default

    @property
    def default(self) -> T:
        return self._default

    def get(self) -> T:
        return self._var.get()

    def __call__(
        self, *args: TParams.args, **kwds: TParams.kwargs
    ) -> ScopedValue[T]:
        return ScopedValue(self._var, self._constructor(*args, **kwds))


if __name__ == "__main__":
    import doctest

    doctest.testmod()
