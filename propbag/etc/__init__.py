"""General-purpose helpers.

Nothing in `propbag.etc` imports anything from the rest of `propbag`, only
other things in `propbag.etc` and external dependencies.
"""

from . import fun, txt, err, ctx, env

from .fun import Option, Some, Nada
