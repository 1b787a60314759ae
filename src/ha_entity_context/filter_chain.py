"""Split variable expressions into a base path and filter calls.

An expression such as ``sensor.temp.state | round(1) | default("n/a")`` is
split on ``|`` into ``["sensor.temp.state", "round(1)", 'default("n/a")']``.
Pipes inside quoted strings or parentheses do not split.
"""

from __future__ import annotations

from .constants import FILTER_SEPARATOR
from .type_definitions import FilterCall

_SINGLE_QUOTE = "'"
_DOUBLE_QUOTE = '"'
_ESCAPE = "\\"


def split_filter_chain(expression: str) -> list[str]:
    """Split an expression into ``[base, filter, ...]`` segments."""
    parts: list[str] = []
    current: list[str] = []
    in_single = False
    in_double = False
    depth = 0
    previous = ""

    for char in expression:
        if char == _SINGLE_QUOTE and not in_double and previous != _ESCAPE:
            in_single = not in_single
        elif char == _DOUBLE_QUOTE and not in_single and previous != _ESCAPE:
            in_double = not in_double
        elif not in_single and not in_double:
            if char == "(":
                depth += 1
            elif char == ")" and depth > 0:
                depth -= 1

        previous = char
        if char == FILTER_SEPARATOR and not in_single and not in_double and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue

        current.append(char)

    tail = "".join(current).strip()
    if tail:
        parts.append(tail)

    return parts


def parse_filter(raw: str) -> FilterCall:
    """Parse ``name`` or ``name(arg)`` into a FilterCall.

    The argument is kept verbatim apart from trimming; filters that expect a
    literal strip quotes themselves with :func:`parse_default_arg`.
    """
    open_paren = raw.find("(")
    if open_paren == -1 or not raw.endswith(")"):
        return FilterCall(raw.strip())

    name = raw[:open_paren].strip()
    argument = raw[open_paren + 1 : -1].strip()
    if not argument:
        return FilterCall(name)
    return FilterCall(name, (argument,))


def parse_default_arg(value: str) -> str:
    """Strip one pair of matching surrounding quotes from a literal argument."""
    trimmed = value.strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in (_SINGLE_QUOTE, _DOUBLE_QUOTE):
        return trimmed[1:-1]
    return trimmed
