"""Path splitting, segment matching, and parameter extraction.

Patterns use a single sigil: a segment starting with ``:`` matches any
value at that position. Segment counts must match exactly; there are no
wildcard or catch-all segments.
"""

import re
from collections.abc import Sequence

from switchyard.errors import ParameterDecodeError

PLACEHOLDER = ":"

# A '%' that doesn't start a two-digit hex escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ESCAPE = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def split_path(path: str) -> list[str]:
    """Split a request path into segments.

    Drops everything from the first ``#``, then from the first ``?``,
    then the empty segment before the leading ``/``::

        "/users/42?x=1#y" -> ["users", "42"]
        "/"               -> [""]
        "/users/"         -> ["users", ""]
    """
    return path.split("#", 1)[0].split("?", 1)[0].split("/")[1:]


def split_pattern(pattern: str) -> list[str]:
    """Split a route pattern into segments, dropping the leading one."""
    return pattern.split("/")[1:]


def is_placeholder(segment: str) -> bool:
    """True if *segment* is a ``:name`` parameter placeholder."""
    return segment[:1] == PLACEHOLDER


def segments_match(pattern_segments: Sequence[str], path_segments: Sequence[str]) -> bool:
    """True if every pattern segment equals its path segment or is a placeholder."""
    if len(pattern_segments) != len(path_segments):
        return False
    return all(
        seg == part or is_placeholder(seg)
        for seg, part in zip(pattern_segments, path_segments, strict=True)
    )


def percent_decode(value: str) -> str:
    """Decode ``%XX`` escapes as UTF-8.

    Strict: a stray ``%`` or an escape sequence that isn't valid UTF-8
    raises ``ParameterDecodeError`` rather than passing through
    undecoded. ``+`` is left alone.
    """
    if _BAD_ESCAPE.search(value):
        raise ParameterDecodeError(value)

    def _decode(match: re.Match[str]) -> str:
        raw = bytes.fromhex(match.group(0).replace("%", ""))
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ParameterDecodeError(value) from None

    return _ESCAPE.sub(_decode, value)


def extract_parameters(
    pattern_segments: Sequence[str], path_segments: Sequence[str]
) -> dict[str, str]:
    """Map each placeholder name to its decoded path segment.

    Both sequences must already have the same length. A name repeated
    within one pattern keeps the last value.
    """
    parameters: dict[str, str] = {}
    for seg, part in zip(pattern_segments, path_segments, strict=True):
        if is_placeholder(seg):
            parameters[seg[1:]] = percent_decode(part)
    return parameters
