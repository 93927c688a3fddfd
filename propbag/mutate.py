"""Writing values into host objects.

Everything here is destructive: host objects are written in place, and the
only new objects are the containers made for missing levels (from the
configured `container_factory`, see `propbag.cfg`).
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Mapping, Sequence

import splatlog
from more_itertools import chunked

from propbag.err import ArityError, EmptyPathError
from propbag.host import create, get_property, materialize, set_property
from propbag.key import KeyMatter, WrappedKey, wrap_key, wrap_keys
from propbag.path import get_value_by_keys

_LOG = splatlog.get_logger(__name__)


def unchecked_set(obj: Any, key: KeyMatter, value: Any) -> Any:
    set_property(obj, wrap_key(key), value)
    return obj


def assoc(obj: Any, *pairs: Any) -> Any:
    """Sets key-value pairs on `obj`, returns `obj`.

    A `None` `obj` is replaced with a new container. Pairs are applied left to
    right, so the last one wins when a key repeats.

    ```python
    >>> assoc({"a": 1}, "b", 2, "a", 3)
    {'a': 3, 'b': 2}

    >>> assoc(None, "a", 1)
    {'a': 1}

    >>> assoc({}, "a")
    Traceback (most recent call last):
        ...
    propbag.err.ArityError: `assoc` expects key/value pairs, given 1 arguments

    ```
    """
    if len(pairs) % 2 != 0:
        raise ArityError("assoc", len(pairs))

    obj = materialize(obj)

    for key, value in chunked(pairs, 2):
        unchecked_set(obj, key, value)

    return obj


def _build_branch(
    keys: Sequence[WrappedKey], leaf_key: WrappedKey, value: Any, depth: int
) -> Any:
    """New containers down `keys`, with `value` at `leaf_key` in the last one.
    Returns the top container, which nothing refers to yet.
    """
    branch = create()
    target = branch

    for offset, key in enumerate(keys, start=depth + 1):
        child = create()
        _LOG.debug(
            "Creating container",
            key=key,
            depth=offset,
            container_type=type(child),
        )
        set_property(target, key, child)
        target = child

    set_property(target, leaf_key, value)

    return branch


def assoc_in_(obj: Any, keys: Sequence[WrappedKey], value: Any) -> Any:
    """`assoc_in` for keys that have already been wrapped."""
    if len(keys) == 0:
        raise EmptyPathError("assoc_in")

    root = materialize(obj)
    target = root

    *parent_keys, leaf_key = keys

    for depth, key in enumerate(parent_keys):
        child = get_property(target, key)

        if child is None:
            # The rest of the path is built off to the side and hung on
            # `target` last, so a failed write leaves `root` untouched
            branch = _build_branch(
                parent_keys[depth + 1 :], leaf_key, value, depth
            )
            _LOG.debug(
                "Creating container",
                key=key,
                depth=depth,
                container_type=type(branch),
            )
            set_property(target, key, branch)
            return root

        target = child

    set_property(target, leaf_key, value)

    return root


def assoc_in(obj: Any, path: Iterable[KeyMatter], value: Any) -> Any:
    """Mutates the value in a nested object structure, where `path` is a
    sequence of keys and `value` is the new value. If any levels do not exist,
    objects will be created.

    ```python
    >>> o = {"a": {"b": 1}}
    >>> assoc_in(o, ["a", "c"], 2)
    {'a': {'b': 1, 'c': 2}}

    >>> assoc_in(None, ["x", "y"], 1)
    {'x': {'y': 1}}

    ```

    Existing levels are written in place, only missing ones are new:

    ```python
    >>> inner = o["a"]
    >>> assoc_in(o, ["a", "d", "e"], 3)["a"] is inner
    True
    >>> o
    {'a': {'b': 1, 'c': 2, 'd': {'e': 3}}}

    ```
    """
    return assoc_in_(obj, wrap_keys(path), value)


def update(
    obj: Any, key: KeyMatter, fn: Callable[..., Any], *args: Any, **kwds: Any
) -> Any:
    """"Updates" a value in `obj`, where `key` is a key and `fn` is a function
    that will take the old value and any supplied args and return the new
    value, which replaces the old value. If the key does not exist, `None` is
    passed as the old value.

    ```python
    >>> update({"n": 1}, "n", lambda n, by: n + by, 10)
    {'n': 11}

    >>> update(None, "seen", lambda old: (old or 0) + 1)
    {'seen': 1}

    ```
    """
    obj = materialize(obj)
    wrapped = wrap_key(key)
    set_property(obj, wrapped, fn(get_property(obj, wrapped), *args, **kwds))
    return obj


def update_in_(
    obj: Any,
    keys: Sequence[WrappedKey],
    fn: Callable[..., Any],
    args: Sequence[Any] = (),
    kwds: Mapping[str, Any] | None = None,
) -> Any:
    """`update_in` for keys that have already been wrapped."""
    if len(keys) == 0:
        raise EmptyPathError("update_in")

    obj = materialize(obj)
    old_value = get_value_by_keys(obj, keys)
    new_value = fn(old_value, *args, **({} if kwds is None else kwds))
    return assoc_in_(obj, keys, new_value)


def update_in(
    obj: Any,
    path: Iterable[KeyMatter],
    fn: Callable[..., Any],
    *args: Any,
    **kwds: Any,
) -> Any:
    """"Updates" a value in a nested object structure, where `path` is a
    sequence of keys and `fn` is a function that will take the old value and
    any supplied args and return the new value, mutating the nested structure.
    If any levels do not exist, objects will be created.

    ```python
    >>> o = {"a": {"b": 1}}
    >>> update_in(o, ["a", "b"], lambda x: x + 10)
    {'a': {'b': 11}}

    >>> update_in(o, ["counts", "x"], lambda n: (n or 0) + 1)
    {'a': {'b': 11}, 'counts': {'x': 1}}

    ```
    """
    return update_in_(obj, wrap_keys(path), fn, args, kwds)


def obj(*keyvals: Any, **kwds: Any) -> Any:
    """Create a new container from an even number of arguments representing
    interleaved keys and values, plus any keyword arguments.

    ```python
    >>> from propbag.keywords import kw
    >>> obj(kw("a"), 1, "b", 2, c=3)
    {'a': 1, 'b': 2, 'c': 3}

    ```
    """
    if len(keyvals) % 2 != 0:
        raise ArityError("obj", len(keyvals))

    result = create()

    for key, value in chunked(keyvals, 2):
        unchecked_set(result, key, value)

    for name, value in kwds.items():
        set_property(result, name, value)

    return result


if __name__ == "__main__":
    import doctest

    doctest.testmod()
