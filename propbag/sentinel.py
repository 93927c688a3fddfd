"""The `NOT_FOUND` marker.

Default for `not_found` arguments, meaning "the caller did not give one". It is
only ever compared by identity, and never stored in a host object.

```python
>>> NOT_FOUND
NOT_FOUND
>>> bool(NOT_FOUND)
False
>>> NotFound() is NOT_FOUND
True

>>> import copy, pickle
>>> copy.deepcopy(NOT_FOUND) is NOT_FOUND
True
>>> pickle.loads(pickle.dumps(NOT_FOUND)) is NOT_FOUND
True

```
"""

from __future__ import annotations
from typing import final


@final
class NotFound:
    __slots__ = ()

    _instance: NotFound | None = None

    def __new__(cls) -> NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self) -> str:
        return "NOT_FOUND"

    def __copy__(self) -> NotFound:
        return self

    def __deepcopy__(self, memo) -> NotFound:
        return self


NOT_FOUND = NotFound()


if __name__ == "__main__":
    import doctest

    doctest.testmod()
