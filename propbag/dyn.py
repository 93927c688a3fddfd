"""Calling functions found in host objects."""

from typing import Any, Mapping, Sequence

from propbag.key import KeyMatter
from propbag.path import get


def call(obj: Any, key: KeyMatter, *args: Any, **kwds: Any) -> Any:
    """Call the function at `key` in `obj` with the given arguments.

    Attributes come back bound, so methods get their `self`:

    ```python
    >>> call("shout", "upper")
    'SHOUT'
    >>> call({"double": lambda x: x * 2}, "double", 21)
    42

    ```

    Whatever is at `key` gets called; a missing key calls `None`, which raises
    `TypeError` the same as it would anywhere else.
    """
    return get(obj, key)(*args, **kwds)


def apply(
    obj: Any,
    key: KeyMatter,
    args: Sequence[Any],
    kwds: Mapping[str, Any] | None = None,
) -> Any:
    """`call` with the arguments given as a sequence (and mapping).

    ```python
    >>> apply("a-b-c", "split", ["-"], {"maxsplit": 1})
    ['a', 'b-c']

    ```
    """
    return get(obj, key)(*args, **({} if kwds is None else kwds))
