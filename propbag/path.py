"""Reading values out of host objects, one key or a whole path at a time."""

from __future__ import annotations
from typing import Any, Iterable, Sequence

from propbag.etc.fun import Option, Some, Nada
from propbag.host import get_property, has_property
from propbag.key import KeyMatter, WrappedKey, wrap_key, wrap_keys
from propbag.sentinel import NOT_FOUND


def get_value_by_keys(obj: Any, keys: Sequence[WrappedKey]) -> Any:
    """Look up `keys` in `obj`, stopping at any `None`.

    >>> get_value_by_keys({"a": {"b": 1}}, ["a", "b"])
    1
    >>> get_value_by_keys({"a": {"b": 1}}, ["x", "b"]) is None
    True
    >>> get_value_by_keys({"a": 1}, [])
    {'a': 1}
    """
    for key in keys:
        if obj is None:
            return None
        obj = get_property(obj, key)
    return obj


def get_option(obj: Any, key: WrappedKey) -> Option[Any]:
    """`Some(value)` if `obj` has `key`, even when the value is `None`,
    otherwise `Nada()`.

    >>> get_option({"a": None}, "a")
    Some(None)
    >>> get_option({"a": None}, "b")
    Nada()
    """
    if has_property(obj, key):
        return Some(get_property(obj, key))
    return Nada()


def get(obj: Any, key: KeyMatter, not_found: Any = None) -> Any:
    """Returns the value mapped to `key`, `not_found` or `None` if `key` is not
    present.

    ```python
    >>> from propbag.keywords import kw
    >>> get({"a": 1}, kw("a"))
    1
    >>> get({"a": 1}, "b", "nope")
    'nope'

    ```

    A key that is there with a `None` value is *found*:

    ```python
    >>> get({"a": None}, "a", "nope") is None
    True

    ```
    """
    return get_option(obj, wrap_key(key)).unwrap_or(not_found)


def get_in_(
    obj: Any, keys: Sequence[WrappedKey], not_found: Any = NOT_FOUND
) -> Any:
    """`get_in` for keys that have already been wrapped."""
    if not_found is NOT_FOUND:
        return get_value_by_keys(obj, keys)

    if len(keys) == 0:
        return not_found if obj is None else obj

    last_obj = get_value_by_keys(obj, keys[:-1])

    if last_obj is None:
        return not_found

    return get_option(last_obj, keys[-1]).unwrap_or(not_found)


def get_in(
    obj: Any, path: Iterable[KeyMatter], not_found: Any = NOT_FOUND
) -> Any:
    """Returns the value in a nested object structure, where `path` is a
    sequence of keys. Returns `None` if the key is not present, or the
    `not_found` value if supplied.

    ```python
    >>> from propbag.keywords import kw
    >>> o = {"a": {"b": 1}}
    >>> get_in(o, [kw("a"), kw("b")])
    1
    >>> get_in(o, ["a", "c"], "none")
    'none'
    >>> get_in(o, ["x", "y", "z"]) is None
    True

    ```

    `not_found` only applies to the last key. A `None` stored there is
    returned as-is:

    ```python
    >>> get_in({"a": {"b": None}}, ["a", "b"], "none") is None
    True

    ```

    The empty path is the object itself:

    ```python
    >>> get_in(o, [])
    {'a': {'b': 1}}

    ```
    """
    return get_in_(obj, wrap_keys(path), not_found)


def contains(obj: Any, key: KeyMatter) -> bool:
    """
    >>> contains({"a": None}, "a")
    True
    >>> contains(None, "a")
    False
    """
    return has_property(obj, wrap_key(key))


def unchecked_get(obj: Any, key: KeyMatter) -> Any:
    """Value of `key` in `obj` with no presence check; absent is `None`."""
    return get_property(obj, wrap_key(key))


if __name__ == "__main__":
    import doctest

    doctest.testmod()
