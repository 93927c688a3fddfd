"""Text formatting for messages, mostly error messages.

> ❗ WARNING
>
> This module is used in already bad situations, like formatting an error that
> is about to be raised. It must **_NOT_** depend on any part of the package
> outside `propbag.etc`, and must **_NOT_** raise unless there is a logic
> error that needs to be fixed.
"""

from typing import Any
import os

from splatlog.lib.text import fmt as splat_fmt, fmt_type_of

from rich.console import Console
from rich.pretty import Pretty
from rich.padding import Padding

__all__ = ["fmt", "fmt_type_of", "fmt_pretty", "tick"]

_CONSOLE = Console(
    file=open(os.devnull, "w"),
    force_terminal=False,
    width=80,
)


def tick(value: Any) -> str:
    """
    >>> tick("container_factory")
    '`container_factory`'
    """
    return "`" + str(value) + "`"


def fmt(x: Any) -> str:
    """Strings pass through as-is, everything else goes to `splatlog`."""
    match x:
        case str(s):
            return s
        case other:
            return splat_fmt(other)


def fmt_pretty(obj: object) -> str:
    with _CONSOLE.capture() as capture:
        _CONSOLE.print(Padding(Pretty(obj), (0, 4)))
    return capture.get()


if __name__ == "__main__":
    import doctest

    doctest.testmod()
