"""Switchyard — the dispatch core of an async request pipeline.

Routes each request to at most one handler by path pattern and method,
extracts ``:name`` path parameters, runs an optional pre-response
handler, and falls back to 404, 405, or 204 when nothing fits.

Basic usage::

    from switchyard import (
        Controller, FunctionHandler, HandlerContext, Operation, Request,
        Response, Route, RoutedRequestHandler,
    )

    async def show_item(context):
        return Response(body=f"item {context.request.parameters['id']}")

    items = Controller(routes=(
        Route("/items/:id", (Operation("GET"),), FunctionHandler(show_item)),
    ))
    dispatcher = RoutedRequestHandler([items])
    response = await dispatcher.handle(HandlerContext(Request("GET", "/items/9")))
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Controller",
    "DispatcherConfig",
    "FunctionHandler",
    "HTTPError",
    "HandlerContext",
    "Operation",
    "ParameterDecodeError",
    "Request",
    "RequestHandler",
    "Response",
    "Route",
    "RouteTable",
    "RoutedRequestHandler",
    "SwitchyardError",
    "configure_logging",
    "set_log_variable",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    if name == "RoutedRequestHandler":
        from switchyard.routing.dispatcher import RoutedRequestHandler

        return RoutedRequestHandler

    if name == "RouteTable":
        from switchyard.routing.table import RouteTable

        return RouteTable

    if name in ("Controller", "FunctionHandler", "Operation", "RequestHandler", "Route"):
        from switchyard.routing import route as _route

        return getattr(_route, name)

    if name == "DispatcherConfig":
        from switchyard.config import DispatcherConfig

        return DispatcherConfig

    if name == "Request":
        from switchyard.http.request import Request

        return Request

    if name == "Response":
        from switchyard.http.response import Response

        return Response

    if name in ("HandlerContext", "set_log_variable"):
        from switchyard import context as _ctx

        return getattr(_ctx, name)

    if name == "configure_logging":
        from switchyard.logging import configure_logging

        return configure_logging

    if name in ("ConfigurationError", "HTTPError", "ParameterDecodeError", "SwitchyardError"):
        from switchyard import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
