"""Shared request-side types for the Dodo Payments client.

This module holds the small value types that flow through every request:
the ``NOT_GIVEN`` sentinel for omitted parameters, per-call
:class:`RequestOptions`, and the :class:`PageRequest` descriptor that
pagination uses to reissue a list call.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Final, Literal

__all__ = [
    'NOT_GIVEN',
    'NotGiven',
    'HeaderValue',
    'HttpMethod',
    'PageRequest',
    'RequestOptions',
]

HttpMethod = Literal['get', 'post', 'put', 'patch', 'delete']
HeaderValue = str | list[str] | None


class NotGiven:
    """Marker for a parameter the caller did not pass.

    ``None`` is a real value on the wire (it clears a field server-side), so
    omission needs its own marker. Values equal to ``NOT_GIVEN`` are dropped
    from the outgoing payload entirely.

    Example:
        >>> def update(name: str | None | NotGiven = NOT_GIVEN): ...
        >>> update()            # name is not sent
        >>> update(name=None)   # name is sent as JSON null
    """

    _instance: 'NotGiven | None' = None

    def __new__(cls) -> 'NotGiven':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return 'NOT_GIVEN'

    def __reduce__(self) -> str:
        return 'NOT_GIVEN'


NOT_GIVEN: Final = NotGiven()


@dataclass(frozen=True)
class RequestOptions:
    """Per-call overrides applied on top of the client defaults.

    Attributes:
        extra_headers: Headers merged over the client's default headers.
        extra_query: Query parameters merged over the method's own.
        extra_body: Top-level keys merged into a JSON object body.
        timeout: Request timeout in seconds; ``None`` uses the client default.
        page_number: Page to request; sent as the ``page_number`` query
            parameter, overriding one given in the method arguments.
    """

    extra_headers: Mapping[str, str] = field(default_factory=dict)
    extra_query: Mapping[str, Any] = field(default_factory=dict)
    extra_body: Mapping[str, Any] = field(default_factory=dict)
    timeout: float | None = None
    page_number: int | None = None

    def merge(self, **changes: Any) -> 'RequestOptions':
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


def _merge_recursive(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict:
    merged = dict(base)
    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge_recursive(current, value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class PageRequest:
    """Everything needed to (re)issue one HTTP request.

    The descriptor is immutable; pagination derives a new one for every
    following page instead of editing the original.
    """

    method: HttpMethod
    path: str
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, HeaderValue] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'query', MappingProxyType(dict(self.query)))
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    def with_query(self, **values: Any) -> 'PageRequest':
        """Return a copy whose query has ``values`` merged in.

        Nested mappings are merged key by key, so sibling query parameters of
        the original request survive.
        """
        return replace(self, query=_merge_recursive(self.query, values))
