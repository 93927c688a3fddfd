"""Reading settings out of environment variables."""

from os import environ


def get_int(name: str) -> int:
    """An `int` from env var `name`, with unset and empty both meaning `0`.

    Bad values raise `ValueError` (from `int`), there is no sensible fallback.
    """
    match environ.get(name):
        case None | "":
            return 0
        case str(s):
            return int(s)
    raise TypeError(f"env var {name} is not a `str`")
