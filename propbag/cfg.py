"""Settings for `propbag`, scoped with `contextvars`.

The global defaults live in `GLOBAL`. Override them for a block of code with
`configure`, which validates the changes and puts the previous settings back
when the block exits:

```python
>>> from collections import OrderedDict
>>> with configure(container_factory=OrderedDict):
...     current().container_factory is OrderedDict
True
>>> current().container_factory is dict
True

```
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, get_type_hints

import splatlog
from splatlog.lib.typeguard import satisfies

from propbag import etc
from propbag.err import ArgTypeError

_LOG = splatlog.get_logger(__name__)

#: Environment variable read for the default `Settings.verbosity`.
VERBOSITY_ENV_NAME = "PROPBAG_VERBOSITY"


@dataclass(frozen=True)
class Settings:
    #: Called with no arguments to build every container `propbag` creates:
    #: missing levels in `assoc_in` / `update_in`, `select_keys` results and
    #: `obj` literals.
    container_factory: Callable[[], Any] = dict

    #: When `True`, `enum.Enum` members are treated as symbolic keys and
    #: wrapped to their `name`, the same as `propbag.keywords.Keyword`.
    wrap_enums: bool = True

    #: Used by `propbag.log.setup` when no verbosity is given.
    verbosity: int = field(
        default_factory=lambda: etc.env.get_int(VERBOSITY_ENV_NAME)
    )

    def derive(self, **changes: Any) -> Settings:
        """A copy of these settings with `changes` applied, after checking
        each change against the field it targets.

        ```python
        >>> Settings().derive(wrap_enums=False).wrap_enums
        False

        >>> Settings().derive(colour="blue")
        Traceback (most recent call last):
            ...
        TypeError: unknown setting 'colour'; known settings are container_factory, verbosity, wrap_enums

        ```
        """
        hints = get_type_hints(type(self))
        names = {f.name for f in fields(self)}

        for name, value in changes.items():
            if name not in names:
                raise TypeError(
                    f"unknown setting {name!r}; known settings are "
                    + ", ".join(sorted(names))
                )
            if name == "container_factory":
                if not callable(value):
                    raise ArgTypeError(name, hints[name], value)
            elif not satisfies(value, hints[name]):
                raise ArgTypeError(name, hints[name], value)

        return replace(self, **changes)


#: The settings in effect when nothing has been configured.
GLOBAL = Settings()


def _derive_from_current(**changes: Any) -> Settings:
    settings = current().derive(**changes)
    _LOG.debug("Deriving settings", changes=changes)
    return settings


_manager = etc.ctx.ContextVarManager(
    name="propbag_settings",
    constructor=_derive_from_current,
    default=GLOBAL,
)


def current() -> Settings:
    """The `Settings` active in the current `contextvars.Context`."""
    return _manager.get()


def configure(**changes: Any) -> etc.ctx.ScopedValue[Settings]:
    """Override settings for the duration of a `with` block.

    Bad values fail here, at the call, not when the block is entered.
    """
    return _manager(**changes)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
