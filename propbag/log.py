"""Logging setup.

`propbag` never sets up logging by itself; modules just get their loggers from
`splatlog` and leave the rest to the application. Applications (and scripts,
and test sessions) that want to see what `propbag` is doing can call `setup`.
"""

from __future__ import annotations
import sys

import splatlog
from rich.console import Console

from propbag import cfg

#: Verbosity → level for the `propbag` logger.
VERBOSITY_LEVELS = (
    (0, splatlog.WARNING),
    (1, splatlog.INFO),
    (2, splatlog.DEBUG),
)


def setup(verbosity: splatlog.Verbosity | None = None) -> None:
    """Send `propbag` logging to a `rich` console on `sys.stderr`.

    When `verbosity` is omitted it comes from the `verbosity` setting (see
    `propbag.cfg`), which defaults to the `PROPBAG_VERBOSITY` environment
    variable.
    """
    if verbosity is None:
        verbosity = cfg.current().verbosity

    console = Console(file=sys.stderr)

    splatlog.setup(
        console=console,
        verbosity_levels={
            splatlog.root_name(__package__): VERBOSITY_LEVELS,
        },
        verbosity=verbosity,
    )
