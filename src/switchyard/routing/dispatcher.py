"""Routed request handler — picks a route for each request and runs it.

Matching and parameter extraction are synchronous. The only awaits are
the controller's pre-response handler (if any) and the route handler.
The route table is read-only, so one dispatcher can serve any number of
concurrent ``handle`` calls without locking.
"""

from __future__ import annotations

from collections.abc import Sequence

from switchyard.config import DispatcherConfig
from switchyard.context import HandlerContext, log_scope, set_log_variable
from switchyard.http.response import Response
from switchyard.logging import get_logger
from switchyard.routing.params import extract_parameters, split_path
from switchyard.routing.route import Controller, Operation, RequestHandler, RouteBinding
from switchyard.routing.table import RouteTable, TableMatch


class RoutedRequestHandler:
    """A ``RequestHandler`` that dispatches on path pattern and method.

    Usage::

        dispatcher = RoutedRequestHandler([items_controller], default_handler=static_files)
        response = await dispatcher.handle(HandlerContext(Request("GET", "/items/9")))

    Outcomes:
    - pattern and method match: the route handler's response, plus an
      ``Allow`` header for ``OPTIONS`` and a ``vary`` header when the
      operation declares one
    - pattern matches, method doesn't: 405 (204 for ``OPTIONS``) with
      an ``allow`` header listing every method under the pattern
    - nothing matches: the default handler's response, or an empty 404
    """

    __slots__ = ("_default_handler", "_logger", "config", "table")

    def __init__(
        self,
        controllers: Sequence[Controller] | None,
        default_handler: RequestHandler | None = None,
        *,
        config: DispatcherConfig | None = None,
    ) -> None:
        self.config = config or DispatcherConfig()
        self.table = RouteTable.from_controllers(controllers)
        self._default_handler = default_handler
        self._logger = get_logger(self.config.logger_name)

    async def handle(self, context: HandlerContext) -> Response:
        """Pass *context* to the handler of the route matching its path.

        Raises ``ParameterDecodeError`` if a parameter segment holds
        malformed percent-encoding. Handler exceptions propagate as-is.
        """
        with log_scope():
            return await self._dispatch(context)

    async def _dispatch(self, context: HandlerContext) -> Response:
        request = context.request
        path = request.pathname
        path_segments = split_path(path)

        self._logger.debug("Finding route for path", extra={"payload": {"path": path}})
        match = self.table.match(path_segments)
        self._logger.debug(
            "Route matched",
            extra={"payload": {"path": path, "match": match.pattern if match else "none"}},
        )

        if match is None:
            return await self._handle_unmatched(context, path)

        allowed_methods = [m for b in match.bindings for m in b.route.methods]
        allow = self.config.allow_separator.join(allowed_methods)

        resolved = _resolve_operation(match, request.method)
        if resolved is None:
            self._logger.info(
                "Operation not supported",
                extra={"payload": {"method": request.method, "allowed_methods": allowed_methods}},
            )
            status = 204 if request.method == "OPTIONS" else 405
            return Response.empty(status, {"allow": allow})

        binding, operation = resolved
        route = binding.route
        set_log_variable("route", route.path)

        parameters = extract_parameters(match.pattern_segments, path_segments)
        self._logger.debug("Extracted parameters from path", extra={"payload": {"parameters": parameters}})

        routed = context.with_request(request.with_parameters(parameters), route)
        pre_response_handler = binding.controller.pre_response_handler
        if pre_response_handler is not None:
            routed = await pre_response_handler.handle(routed)

        response = await route.handler.handle(routed)

        extra_headers: dict[str, str] = {}
        if request.method == "OPTIONS":
            extra_headers["Allow"] = allow
        if operation.vary:
            extra_headers["vary"] = ", ".join(operation.vary)
        return response.with_headers(extra_headers) if extra_headers else response

    async def _handle_unmatched(self, context: HandlerContext, path: str) -> Response:
        if self._default_handler is not None:
            self._logger.info(
                "No matching route found, calling default handler", extra={"payload": {"path": path}}
            )
            return await self._default_handler.handle(context)

        self._logger.error("No matching route found", extra={"payload": {"path": path}})
        return Response.empty(404)


def _resolve_operation(match: TableMatch, method: str) -> tuple[RouteBinding, Operation] | None:
    """First binding (in registration order) with an operation for *method*."""
    for binding in match.bindings:
        operation = binding.route.find_operation(method)
        if operation is not None:
            return binding, operation
    return None
