"""Route, Operation, and Controller frozen dataclasses.

Also the ``RequestHandler`` protocol shared by route handlers,
pre-response handlers, and the dispatcher's default handler.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from anyio import to_thread

from switchyard._internal.invoke import invoke
from switchyard.context import HandlerContext


@runtime_checkable
class RequestHandler(Protocol):
    """Anything that turns a context into a response.

    Accepts any object with a matching ``handle``::

        class Hello:
            async def handle(self, context: HandlerContext) -> Response:
                return Response(body="hello")

    Pre-response handlers follow the same shape but return a
    ``HandlerContext`` instead of a ``Response``.
    """

    async def handle(self, context: HandlerContext) -> Any: ...


class FunctionHandler:
    """Adapt a plain function (sync or async) to ``RequestHandler``.

    Usage::

        async def show_item(context):
            return Response(body=context.request.parameters["id"])

        Route("/items/:id", (Operation("GET"),), FunctionHandler(show_item))

    With ``offload=True`` a plain ``def`` runs in an anyio worker thread
    so blocking work doesn't stall other requests.
    """

    __slots__ = ("func", "offload")

    def __init__(
        self,
        func: Callable[[HandlerContext], Any | Awaitable[Any]],
        *,
        offload: bool = False,
    ) -> None:
        self.func = func
        self.offload = offload

    async def handle(self, context: HandlerContext) -> Any:
        if self.offload and not inspect.iscoroutinefunction(self.func):
            return await to_thread.run_sync(self.func, context)
        return await invoke(self.func, context)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"FunctionHandler({name})"


@dataclass(frozen=True, slots=True)
class Operation:
    """One HTTP method a route supports.

    ``vary`` lists request header names the response varies on; they are
    joined into the response's ``vary`` header.
    """

    method: str
    vary: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Route:
    """A path pattern, the operations it supports, and its handler.

    Segments of ``path`` starting with ``:`` are parameter placeholders::

        Route("/users/:id/posts/:postId", (Operation("GET"),), handler)
    """

    path: str
    operations: tuple[Operation, ...]
    handler: RequestHandler

    @property
    def methods(self) -> tuple[str, ...]:
        """Operation methods in declaration order."""
        return tuple(op.method for op in self.operations)

    def find_operation(self, method: str) -> Operation | None:
        """Return the first operation declared for *method*, if any."""
        for op in self.operations:
            if op.method == method:
                return op
        return None


@dataclass(frozen=True, slots=True)
class Controller:
    """A group of routes sharing an optional pre-response handler."""

    routes: tuple[Route, ...] = ()
    pre_response_handler: RequestHandler | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteBinding:
    """A route together with the controller that registered it."""

    controller: Controller
    route: Route
