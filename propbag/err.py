from . import etc

# Re-Exports
# ============================================================================
#
# `ArgTypeError` lives in `propbag.etc.err` so that `propbag.etc` stays free of
# the rest of the package. It is re-exported here so that everything raised by
# `propbag` can be imported from one place.
#
ArgTypeError = etc.err.ArgTypeError


class PropbagError(Exception):
    """Base for errors `propbag` raises itself.

    Errors from the host objects (assigning into a `tuple`, setting an
    attribute on an `int`, ...) are never wrapped in one of these, they
    propagate as-is.
    """

    pass


class ArityError(PropbagError, TypeError):
    """Raised when interleaved key/value arguments don't pair up.

    ```python
    >>> raise ArityError("assoc", 3)
    Traceback (most recent call last):
        ...
    propbag.err.ArityError: `assoc` expects key/value pairs, given 3 arguments

    ```
    """

    def __init__(self, function: str, count: int):
        super().__init__(
            f"{etc.txt.tick(function)} expects key/value pairs, "
            f"given {count} arguments"
        )


class EmptyPathError(PropbagError, ValueError):
    """Raised when asked to write at the empty path, which names the root
    itself rather than a place inside it.
    """

    def __init__(self, function: str):
        super().__init__(
            f"{etc.txt.tick(function)} needs at least one key in the path"
        )
