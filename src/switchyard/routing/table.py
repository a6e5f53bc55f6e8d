"""Immutable route table keyed by literal path pattern.

Built in one pass from a list of controllers. Entries keep insertion
order, and matching walks them in that order, so when two patterns fit
the same path the one registered first always wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from switchyard.errors import ConfigurationError
from switchyard.routing.params import segments_match, split_pattern
from switchyard.routing.route import Controller, Route, RouteBinding


@dataclass(frozen=True, slots=True)
class TableEntry:
    """A literal pattern and every binding registered under it."""

    pattern: str
    segments: tuple[str, ...]
    bindings: tuple[RouteBinding, ...]


@dataclass(frozen=True, slots=True)
class TableMatch:
    """Result of a structural match against the table."""

    pattern: str
    pattern_segments: tuple[str, ...]
    bindings: tuple[RouteBinding, ...]


class RouteTable:
    """Ordered, read-only mapping of pattern to ``RouteBinding`` tuples.

    Usage::

        table = RouteTable.from_controllers([users, posts])
        match = table.match(["users", "42"])
        if match is not None:
            for binding in match.bindings:
                ...

    Patterns are stored verbatim: ``/users`` and ``/users/`` are
    different entries.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Iterable[TableEntry] = ()) -> None:
        self._entries: tuple[TableEntry, ...] = tuple(entries)
        self._index: dict[str, int] = {e.pattern: i for i, e in enumerate(self._entries)}

    @classmethod
    def from_controllers(cls, controllers: Sequence[Controller] | None) -> RouteTable:
        """Fold *controllers* into a table.

        Controllers are visited in list order, and each controller's
        routes in declaration order. Bindings for a repeated pattern
        accumulate in that order.

        Raises ``ConfigurationError`` if *controllers* is ``None``.
        """
        # Only a missing list is an error; [] builds an empty table
        if controllers is None:
            msg = "A controller list is required to build the route table."
            raise ConfigurationError(msg)

        grouped: dict[str, list[RouteBinding]] = {}
        for controller in controllers:
            for route in controller.routes:
                grouped.setdefault(route.path, []).append(RouteBinding(controller, route))

        return cls(
            TableEntry(pattern, tuple(split_pattern(pattern)), tuple(bindings))
            for pattern, bindings in grouped.items()
        )

    # -- Lookup --

    def match(self, path_segments: Sequence[str]) -> TableMatch | None:
        """Return the first entry whose pattern fits *path_segments*."""
        for entry in self._entries:
            if segments_match(entry.segments, path_segments):
                return TableMatch(entry.pattern, entry.segments, entry.bindings)
        return None

    def bindings(self, pattern: str) -> tuple[RouteBinding, ...]:
        """Bindings registered under the exact *pattern*, or ``()``."""
        i = self._index.get(pattern)
        return () if i is None else self._entries[i].bindings

    # -- Introspection --

    @property
    def patterns(self) -> tuple[str, ...]:
        """Every pattern in insertion order."""
        return tuple(e.pattern for e in self._entries)

    @property
    def routes(self) -> list[Route]:
        """Every registered route, flattened in table order."""
        return [b.route for e in self._entries for b in e.bindings]

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._index

    def __repr__(self) -> str:
        return f"RouteTable({list(self.patterns)!r})"
