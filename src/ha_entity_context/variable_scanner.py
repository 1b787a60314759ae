"""Scanner for bracketed entity context variables in free text.

The scan walks the template once with a local cursor. Next-occurrence positions
of each delimiter are cached and only searched again once the cursor passes
them, so the cost stays linear in the template length.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterator
from typing import NamedTuple

from .constants import ALL_DELIMITERS, CLOSE_DELIMITERS, DELIMITER_PAIRS, OPEN_DELIMITERS
from .type_definitions import Variable

# Position not searched yet
_UNSEARCHED = -2


class VariableSpan(NamedTuple):
    """A delimited span, possibly closed by the other delimiter kind."""

    start: int
    end: int
    opener: str
    closer: str
    interior: str

    @property
    def raw(self) -> str:
        """Return the span text including delimiters."""
        return f"{self.opener}{self.interior}{self.closer}"


def iter_variable_spans(template: str | None) -> Iterator[VariableSpan]:
    """Iterate over every delimited span, including mismatched pairs.

    A span runs from an opening delimiter to the first closing delimiter of
    either kind after it. Spans do not nest or overlap.
    """
    if not template:
        return

    positions = dict.fromkeys((*OPEN_DELIMITERS, *CLOSE_DELIMITERS), _UNSEARCHED)

    def locate(token: str, cursor: int) -> int:
        position = positions[token]
        if position != -1 and position < cursor:
            position = template.find(token, cursor)
            positions[token] = position
        return position

    def nearest(tokens: tuple[str, ...], cursor: int) -> tuple[int, str]:
        found = [(position, token) for token in tokens if (position := locate(token, cursor)) != -1]
        return min(found) if found else (-1, "")

    cursor = 0
    while True:
        start, opener = nearest(OPEN_DELIMITERS, cursor)
        if start == -1:
            return
        interior_start = start + len(opener)
        close_at, closer = nearest(CLOSE_DELIMITERS, interior_start)
        if close_at == -1:
            # No closer anywhere after this opener, so no later span can close
            return
        cursor = close_at + len(closer)
        yield VariableSpan(start, cursor, opener, closer, template[interior_start:close_at])


def is_recognized_span(span: VariableSpan, delimiters: Collection[str] = ALL_DELIMITERS) -> bool:
    """Return True when a span's delimiters pair up and that pair is enabled."""
    pair = (span.opener, span.closer)
    return any(DELIMITER_PAIRS[kind] == pair for kind in delimiters if kind in DELIMITER_PAIRS)


def substitute_variables(template: str, replacement: Callable[[VariableSpan], str]) -> str:
    """Replace every delimited span, including mismatched pairs, via a callback."""
    pieces: list[str] = []
    position = 0
    for span in iter_variable_spans(template):
        pieces.append(template[position : span.start])
        pieces.append(replacement(span))
        position = span.end
    if not pieces:
        return template
    pieces.append(template[position:])
    return "".join(pieces)


def scan_variables(template: str | None, delimiters: Collection[str] = ALL_DELIMITERS) -> Iterator[Variable]:
    """Yield the variables in a template, left to right.

    A span closed by the other kind of delimiter is consumed but not yielded, so
    ``[[a}} [[b]]`` produces only ``[[b]]``.
    """
    for span in iter_variable_spans(template):
        if not is_recognized_span(span, delimiters):
            continue
        yield Variable(raw=span.raw, expression=span.interior.strip(), start=span.start, end=span.end)


def parse_variables(template: str | None, delimiters: Collection[str] = ALL_DELIMITERS) -> list[Variable]:
    """Return all variables found in a template."""
    return list(scan_variables(template, delimiters))
