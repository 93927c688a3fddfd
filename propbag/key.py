"""Turning logical keys into property keys.

Throughout `propbag`, functions with a trailing underscore (`get_in_`,
`assoc_in_`, ...) take keys that have *already* been wrapped; the plain names
wrap for you.
"""

from enum import Enum
from typing import Any, Hashable, Iterable

from propbag import cfg
from propbag.keywords import Keyword

#: What callers may use as a key: a `Keyword`, an `Enum` member or anything the
#: host objects accept directly (`str`, `int`, ...).
KeyMatter = Any

#: A key in the form the host objects accept.
WrappedKey = Hashable


def wrap_key(key: KeyMatter) -> WrappedKey:
    """Returns `key` or, if it is symbolic, its name.

    ```python
    >>> from propbag.keywords import kw
    >>> wrap_key(kw("a"))
    'a'
    >>> wrap_key("a")
    'a'
    >>> wrap_key(0)
    0

    >>> from enum import Enum
    >>> class Color(Enum):
    ...     RED = 1
    >>> wrap_key(Color.RED)
    'RED'

    ```

    Wrapping is idempotent, a wrapped key wraps to itself.

    ```python
    >>> wrap_key(wrap_key(kw("a")))
    'a'

    ```
    """
    match key:
        case Keyword():
            return key.name
        case Enum() if cfg.current().wrap_enums:
            return key.name
    return key


def wrap_keys(keys: Iterable[KeyMatter]) -> list[WrappedKey]:
    """
    >>> from propbag.keywords import kw
    >>> wrap_keys([kw("a"), "b", 0])
    ['a', 'b', 0]
    """
    return [wrap_key(key) for key in keys]


if __name__ == "__main__":
    import doctest

    doctest.testmod()
