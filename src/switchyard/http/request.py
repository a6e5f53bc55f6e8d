"""Immutable HTTP request.

Frozen metadata handed to the dispatcher by the transport layer. Derived
requests (for example one carrying path parameters) are new objects;
the original is never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType


def _strip_fragment_and_query(url: str) -> str:
    return url.split("#", 1)[0].split("?", 1)[0]


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``url`` is the raw request target and may carry a ``?query`` and a
    ``#fragment``. ``parameters`` is empty until the dispatcher derives
    a request for a matched route.
    """

    method: str
    url: str
    parameters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: bytes = b""

    # -- Computed properties --

    @property
    def pathname(self) -> str:
        """The URL path with fragment and query removed."""
        return _strip_fragment_and_query(self.url)

    @property
    def query(self) -> str:
        """The raw query string, without the leading ``?``."""
        without_fragment = self.url.split("#", 1)[0]
        _, _, qs = without_fragment.partition("?")
        return qs

    # -- Derivation --

    def with_parameters(self, parameters: Mapping[str, str]) -> Request:
        """Return a new Request carrying *parameters*."""
        return replace(self, parameters=MappingProxyType(dict(parameters)))
