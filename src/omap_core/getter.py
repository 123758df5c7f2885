"""Dotted-path lookup for OMap Core."""

from __future__ import annotations

from .model import Empty, Nested, OrderedMap, Value, _EmptyType


def lookup(omap: OrderedMap, path: str) -> Value | _EmptyType:
    """Resolve ``"a.b.c"`` through nested maps.

    - each step must name a key of a Nested map
    - a missing key, or a step into a Leaf, returns Empty
    - an empty path returns the map itself as Nested
    """
    if not path:
        return Nested(omap)

    current: Value | _EmptyType = Nested(omap)
    for step in path.split("."):
        if not isinstance(current, Nested):
            return Empty
        current = current.map.get(step)
    return current
