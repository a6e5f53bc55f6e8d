"""Switchyard exception hierarchy.

Shared across the route table, dispatcher, and parameter parsing so every
module raises and catches the same types.

Routing outcomes (404, 405, 204) are responses, not exceptions. Only
configuration mistakes and malformed request data raise.
"""


class SwitchyardError(Exception):
    """Base for all switchyard-specific errors."""


class ConfigurationError(SwitchyardError):
    """Raised when the dispatcher is constructed with invalid input.

    Surfaces at construction time, before any request is served.
    """


class HTTPError(SwitchyardError):
    """An error that maps directly to an HTTP status code.

    The dispatcher never renders these itself. The transport layer that
    awaits ``handle()`` decides how to turn them into a response.
    """

    def __init__(
        self,
        status: int,
        detail: str = "",
        headers: tuple[tuple[str, str], ...] = (),
    ) -> None:
        super().__init__(status, detail)
        self.status = status
        self.detail = detail
        self.headers = headers

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class ParameterDecodeError(HTTPError):
    """400 — a path segment bound to a parameter is not valid percent-encoding.

    Carries the raw *segment* so callers can report it.
    """

    def __init__(self, segment: str, detail: str = "") -> None:
        super().__init__(
            status=400,
            detail=detail or f"Malformed percent-encoding in path segment {segment!r}",
        )
        self.segment = segment
