"""Reader layer: restricted JSON-like text -> OrderedMap.

Grammar (no whitespace between tokens, no escapes)::

    object ::= '{' ( pair ( ',' pair )* )? '}'
    pair   ::= string ':' value
    value  ::= string | object
    string ::= '"' char* '"'

Every function here takes a start position and returns what it read together
with the number of characters it consumed, so nested calls compose without a
shared cursor.
"""

from __future__ import annotations

from .config import CLOSE_BRACE, COLON, COMMA, DEFAULT_MAX_DEPTH, OPEN_BRACE, QUOTE
from .errors import (
    ExpectedColonError,
    ExpectedObjectStartError,
    MalformedObjectStructureError,
    MalformedTermError,
    NestingTooDeepError,
    UnsupportedValueTypeError,
)
from .model import Leaf, Nested, OrderedMap, Value
from .terms import char_at, extract_term


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> OrderedMap:
    """Parse the object at the start of *text*.

    Characters after the object's closing brace are ignored.
    """
    omap, _ = parse_object(text, 0, max_depth=max_depth)
    return omap


def parse_object(
    text: str, pos: int, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> tuple[OrderedMap, int]:
    """Parse one object starting at *pos*; returns ``(map, consumed)``."""
    return _parse_object(text, pos, 1, max_depth)


# ---------------------------------------------------------------------------
# Object / value
# ---------------------------------------------------------------------------

def _parse_object(text: str, pos: int, depth: int, max_depth: int) -> tuple[OrderedMap, int]:
    found = char_at(text, pos)
    if found != OPEN_BRACE:
        raise ExpectedObjectStartError(pos, repr(OPEN_BRACE), found)
    if depth > max_depth:
        raise NestingTooDeepError(pos, f"at most {max_depth} nesting levels", found)

    result = OrderedMap()
    cursor = pos + 1

    # {} right after the opening brace
    if char_at(text, cursor) == CLOSE_BRACE:
        return result, 2

    while True:
        # Key
        found = char_at(text, cursor)
        if found != QUOTE:
            raise MalformedTermError(cursor, "quoted key", found)
        key, used = extract_term(text, cursor)
        cursor += used

        # Colon
        found = char_at(text, cursor)
        if found != COLON:
            raise ExpectedColonError(cursor, repr(COLON), found)
        cursor += 1

        # Value
        value, used = _parse_value(text, cursor, depth, max_depth)
        cursor += used
        result.put(key, value)

        # Separator or close
        found = char_at(text, cursor)
        if found == COMMA:
            cursor += 1
        elif found == CLOSE_BRACE:
            cursor += 1
            return result, cursor - pos
        else:
            raise MalformedObjectStructureError(cursor, f"{COMMA!r} or {CLOSE_BRACE!r}", found)


def _parse_value(text: str, pos: int, depth: int, max_depth: int) -> tuple[Value, int]:
    found = char_at(text, pos)
    if found == OPEN_BRACE:
        nested, used = _parse_object(text, pos, depth + 1, max_depth)
        return Nested(nested), used
    if found == QUOTE:
        term, used = extract_term(text, pos)
        return Leaf(term), used
    raise UnsupportedValueTypeError(pos, "object or quoted string", found)
