from typing import Any, Iterable, Sequence

from propbag.host import create, get_property, has_property, set_property
from propbag.key import KeyMatter, WrappedKey, wrap_keys


def select_keys_(obj: Any, keys: Sequence[WrappedKey]) -> Any:
    """`select_keys` for keys that have already been wrapped."""
    result = create()
    for key in keys:
        if has_property(obj, key):
            set_property(result, key, get_property(obj, key))
    return result


def select_keys(obj: Any, keys: Iterable[KeyMatter]) -> Any:
    """Returns a new container holding only those entries in `obj` whose key
    is in `keys`. Keys that aren't there are left out entirely.

    ```python
    >>> select_keys({"a": 1, "b": 2, "c": 3}, ["c", "a", "z"])
    {'c': 3, 'a': 1}

    ```

    Values are shared with `obj`, not copied:

    ```python
    >>> inner = {"b": 1}
    >>> select_keys({"a": inner}, ["a"])["a"] is inner
    True

    ```
    """
    return select_keys_(obj, wrap_keys(keys))


if __name__ == "__main__":
    import doctest

    doctest.testmod()
