"""Ambient request context passed explicitly into every log call."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Context(Protocol):
    """Read-only lookup the logger pulls declared keys from.

    Any Mapping satisfies this. A ``None`` result counts as a miss.
    """

    def get(self, key: str, /) -> Any: ...


class RequestContext(Mapping[str, Any]):
    """Immutable request-scoped key/value carrier.

    Deriving a context never touches the parent, so a context can be handed
    to concurrent workers and extended independently by each of them.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        merged = dict(values or {})
        merged.update(kwargs)
        self._values: Mapping[str, Any] = MappingProxyType(merged)

    @classmethod
    def background(cls) -> "RequestContext":
        """Return an empty root context."""
        return cls()

    def with_value(self, key: str, value: Any) -> "RequestContext":
        """Return a child context with one key set."""
        return RequestContext(self._values, **{key: value})

    def with_values(self, **values: Any) -> "RequestContext":
        """Return a child context with several keys set."""
        return RequestContext(self._values, **values)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RequestContext({dict(self._values)!r})"
