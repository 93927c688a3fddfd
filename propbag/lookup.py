from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Iterator

from rich.repr import RichReprResult

from propbag import path
from propbag.etc.fun import Some
from propbag.host import iter_properties
from propbag.key import KeyMatter, wrap_key


class Lookup(Mapping[Any, Any]):
    """A read-only `typing.Mapping` view of a host object, with the same
    lookup rules as `propbag.path.get`.

    ```python
    >>> from types import SimpleNamespace
    >>> from propbag.keywords import kw
    >>> view = Lookup(SimpleNamespace(a=1, b=None))
    >>> view[kw("a")]
    1
    >>> view.get("b", "nope") is None
    True
    >>> view.get("c", "nope")
    'nope'
    >>> view["c"]
    Traceback (most recent call last):
        ...
    KeyError: 'c'
    >>> sorted(k for k in view if not k.startswith("_"))
    ['a', 'b']
    >>> view["c"] = 3
    Traceback (most recent call last):
        ...
    TypeError: 'Lookup' object does not support item assignment

    ```
    """

    __slots__ = ("_obj",)

    _obj: Any

    def __init__(self, obj: Any):
        self._obj = obj

    @property
    def obj(self) -> Any:
        """The host object this view reads from."""
        return self._obj

    def unwrap(self) -> Any:
        return self._obj

    def __getitem__(self, key: KeyMatter) -> Any:
        wrapped = wrap_key(key)
        match path.get_option(self._obj, wrapped):
            case Some() as found:
                return found.unwrap()
        raise KeyError(wrapped)

    def __contains__(self, key: object) -> bool:
        return path.contains(self._obj, key)

    def __iter__(self) -> Iterator[Any]:
        return iter_properties(self._obj)

    def __len__(self) -> int:
        return sum(1 for _ in iter_properties(self._obj))

    def get(self, key: KeyMatter, default: Any = None) -> Any:
        return path.get(self._obj, key, default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._obj!r})"

    def __rich_repr__(self) -> RichReprResult:
        yield self._obj


def lookup(obj: Any) -> Lookup:
    """Returns a `Lookup` reading keys from `obj`."""
    return Lookup(obj)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
