##############################################################################
# Host Object Primitives
# ============================================================================
#
# Everything else in `propbag` reads and writes host objects through the
# functions here, and they all take keys that have already been wrapped (see
# `propbag.key`).
#
# A host object is whatever the key means something to:
#
# 1.  `collections.abc.Mapping`: keys are mapping keys.
# 2.  `collections.abc.Sequence` (other than `str` and `bytes`): keys are
#     non-negative `int` indexes.
# 3.  Anything else: `str` keys are attribute names.
#
# Reads never raise for absence. Writes go straight to the host, and whatever
# the host raises is the caller's to deal with.
#
##############################################################################

from __future__ import annotations
from collections.abc import Mapping, MutableSequence, Sequence
from typing import Any, Iterator

from propbag import cfg
from propbag.key import WrappedKey

_TEXT_TYPES = (str, bytes, bytearray)


def _is_indexed(obj: object) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, _TEXT_TYPES)


def _is_index(obj: Sequence, key: WrappedKey) -> bool:
    return (
        isinstance(key, int)
        and not isinstance(key, bool)
        and 0 <= key < len(obj)
    )


def has_property(obj: Any, key: WrappedKey) -> bool:
    """
    >>> has_property({"a": None}, "a")
    True
    >>> has_property([10, 20], 1), has_property([10, 20], 2)
    (True, False)
    >>> has_property(None, "a")
    False
    """
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return key in obj
    if _is_indexed(obj):
        return _is_index(obj, key)
    return isinstance(key, str) and hasattr(obj, key)


def get_property(obj: Any, key: WrappedKey) -> Any:
    """Value of `key` in `obj`, or `None` if there isn't one.

    >>> get_property({"a": 1}, "a")
    1
    >>> get_property({"a": 1}, "b") is None
    True
    >>> get_property(["x", "y"], 1)
    'y'

    >>> from types import SimpleNamespace
    >>> get_property(SimpleNamespace(a=1), "a")
    1
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        # Checked first so `defaultdict` and friends don't grow on a read
        if key in obj:
            return obj[key]
        return None
    if _is_indexed(obj):
        if _is_index(obj, key):
            return obj[key]
        return None
    if isinstance(key, str):
        return getattr(obj, key, None)
    return None


def set_property(obj: Any, key: WrappedKey, value: Any) -> None:
    if isinstance(obj, (Mapping, MutableSequence)):
        obj[key] = value  # type: ignore[index]
    else:
        setattr(obj, key, value)


def iter_properties(obj: Any) -> Iterator[WrappedKey]:
    """
    >>> list(iter_properties({"a": 1, "b": 2}))
    ['a', 'b']
    >>> list(iter_properties(["x", "y"]))
    [0, 1]

    Attributes are everything `hasattr` sees, class ones included:

    >>> from types import SimpleNamespace
    >>> names = list(iter_properties(SimpleNamespace(a=1)))
    >>> "a" in names, "__class__" in names
    (True, True)
    >>> list(iter_properties(None))
    []
    """
    if obj is None:
        return iter(())
    if isinstance(obj, Mapping):
        return iter(obj)
    if _is_indexed(obj):
        return iter(range(len(obj)))
    # The same names `has_property` accepts, as far as `dir` can list them
    return (name for name in dir(obj) if hasattr(obj, name))


def create() -> Any:
    """A new, empty container, from the configured `container_factory`."""
    return cfg.current().container_factory()


def materialize(obj: Any) -> Any:
    """`obj`, or a new container in place of `None`."""
    if obj is None:
        return create()
    return obj
