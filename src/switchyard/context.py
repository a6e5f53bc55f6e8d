"""Handler context and request-scoped log variables.

Provides:
- ``HandlerContext``: the immutable value passed to every handler.
- Log variables: named values (such as the matched route) attached to
  every log record emitted for the rest of the current request.

Log variables live in a ``ContextVar``, which is task-local under
asyncio and trio. Concurrent requests never see each other's variables.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from switchyard.http.request import Request

if TYPE_CHECKING:
    from switchyard.routing.route import Route


@dataclass(frozen=True, slots=True)
class HandlerContext:
    """What a handler receives: the request and, once matched, its route."""

    request: Request
    route: Route | None = None

    def with_request(self, request: Request, route: Route | None = None) -> HandlerContext:
        """Return a new context carrying *request* and *route*.

        The current route is kept when *route* is not given.
        """
        return replace(self, request=request, route=route if route is not None else self.route)


# -- Log variables --

_log_variables: ContextVar[Mapping[str, Any]] = ContextVar(
    "switchyard_log_variables", default=MappingProxyType({})
)


def set_log_variable(name: str, value: Any) -> None:
    """Attach *name* to every log record for the rest of the current task."""
    _log_variables.set(MappingProxyType({**_log_variables.get(), name: value}))


def log_variables() -> Mapping[str, Any]:
    """Return a read-only snapshot of the current log variables."""
    return _log_variables.get()


@contextmanager
def log_scope() -> Iterator[None]:
    """Restore the previous log variables on exit.

    Usage::

        with log_scope():
            set_log_variable("route", "/items/:id")
            ...  # records carry route=/items/:id
        # route is gone again
    """
    token = _log_variables.set(_log_variables.get())
    try:
        yield
    finally:
        _log_variables.reset(token)
