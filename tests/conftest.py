"""Shared fixtures and builders for switchyard tests."""

import pytest

from switchyard.context import HandlerContext
from switchyard.http.request import Request
from switchyard.http.response import Response
from switchyard.routing.route import Controller, Operation, Route


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


class RecordingHandler:
    """Route handler that remembers every context it was given."""

    def __init__(self, response: Response | None = None) -> None:
        self.response = response or Response(body="ok")
        self.contexts: list[HandlerContext] = []

    async def handle(self, context: HandlerContext) -> Response:
        self.contexts.append(context)
        return self.response


def make_route(
    path: str,
    *methods: str,
    handler: object | None = None,
    vary: tuple[str, ...] = (),
) -> Route:
    operations = tuple(Operation(m, vary) for m in (methods or ("GET",)))
    return Route(path=path, operations=operations, handler=handler or RecordingHandler())


def make_controller(*routes: Route, pre_response_handler: object | None = None) -> Controller:
    return Controller(routes=routes, pre_response_handler=pre_response_handler)


def make_context(method: str, url: str) -> HandlerContext:
    return HandlerContext(Request(method=method, url=url))
