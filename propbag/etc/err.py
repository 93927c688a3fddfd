from textwrap import dedent
from typing import Any

from . import txt


class ArgTypeError(TypeError):
    """An argument (or setting) was given a value of the wrong type.

    The message names the argument, the expected type and the received value,
    so it reads sensibly both in a terminal and in a log.
    """

    MULTILINE_TEMPLATE = dedent(
        """\
        Expected `{name}` to be `{expected_type}`.

        Given `{type}`:

        {value}
        """
    )

    name: str
    expected_type: Any
    value: Any

    def __init__(self, name: str, expected_type: Any, value: Any):
        self.name = name
        self.expected_type = expected_type
        self.value = value

        message = self.MULTILINE_TEMPLATE.format(
            name=name,
            expected_type=txt.fmt(expected_type),
            type=txt.fmt_type_of(value),
            value=txt.fmt_pretty(value),
        )

        super().__init__(message)
