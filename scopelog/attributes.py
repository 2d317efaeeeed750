"""Key/value attributes attached to log records."""

from typing import Any, NamedTuple


class Attribute(NamedTuple):
    """A single key/value pair on a log record.

    Being a tuple, a plain ``(key, value)`` pair is interchangeable with an
    Attribute anywhere attributes are accepted.
    """

    key: str
    value: Any


# Anything accepted as an attribute at a call site
AttributeLike = Attribute | tuple[str, Any]
