"""Symbolic keys.

A `Keyword` is an interned name: asking for the same name twice gives back the
same object, so keywords compare and hash by identity and are cheap to use as
keys in code that does a lot of lookups.

```python
>>> kw("user") is Keyword("user")
True

>>> kw("user")
Keyword('user')

>>> str(kw("user"))
':user'

```

Keywords can carry a namespace, given either separately or as a `ns/name`
string. Only the `name` is used when the keyword is turned into a property key.

```python
>>> k = kw("auth/token")
>>> k.namespace, k.name
('auth', 'token')

>>> k is Keyword("token", "auth")
True

```
"""

from __future__ import annotations
from typing import ClassVar, TypeGuard, final

from rich.repr import RichReprResult

NAMESPACE_SEPARATOR = "/"


@final
class Keyword:
    __slots__ = ("_name", "_namespace")

    _interned: ClassVar[dict[tuple[str | None, str], Keyword]] = {}

    _name: str
    _namespace: str | None

    def __new__(cls, name: str, namespace: str | None = None) -> Keyword:
        if not isinstance(name, str) or name == "":
            raise TypeError(
                f"keyword name must be a non-empty `str`, given {name!r}"
            )

        if namespace is None and NAMESPACE_SEPARATOR in name[1:]:
            namespace, name = name.split(NAMESPACE_SEPARATOR, 1)
            if name == "":
                raise TypeError(
                    "keyword name must be a non-empty `str`, given "
                    f"{namespace + NAMESPACE_SEPARATOR!r}"
                )

        ident = (namespace, name)

        try:
            return cls._interned[ident]
        except KeyError:
            pass

        keyword = super().__new__(cls)
        object.__setattr__(keyword, "_name", name)
        object.__setattr__(keyword, "_namespace", namespace)
        return cls._interned.setdefault(ident, keyword)

    @property
    def name(self) -> str:
        return self._name

    @property
    def namespace(self) -> str | None:
        return self._namespace

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Keyword, (self._name, self._namespace))

    def __copy__(self) -> Keyword:
        return self

    def __deepcopy__(self, memo) -> Keyword:
        return self

    def __str__(self) -> str:
        if self._namespace is None:
            return f":{self._name}"
        return f":{self._namespace}{NAMESPACE_SEPARATOR}{self._name}"

    def __repr__(self) -> str:
        if self._namespace is None:
            return f"Keyword({self._name!r})"
        return f"Keyword({self._name!r}, {self._namespace!r})"

    def __rich_repr__(self) -> RichReprResult:
        yield self._name
        yield "namespace", self._namespace, None


def kw(name: str, namespace: str | None = None) -> Keyword:
    """Shorthand for `Keyword`."""
    return Keyword(name, namespace)


def is_keyword(x: object) -> TypeGuard[Keyword]:
    return isinstance(x, Keyword)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
