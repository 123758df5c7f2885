"""Serializer: OrderedMap -> restricted JSON-like text."""

from __future__ import annotations

from .config import CLOSE_BRACE, COLON, COMMA, OPEN_BRACE, QUOTE
from .model import Nested, OrderedMap, Value


def serialize(omap: OrderedMap) -> str:
    """Render *omap* in insertion order, e.g. ``{"a":"1","b":{"c":"2"}}``."""
    if not omap.size():
        return OPEN_BRACE + CLOSE_BRACE
    pairs = (
        f"{QUOTE}{key}{QUOTE}{COLON}{_render_value(value)}"
        for key, value in omap.iterate()
    )
    return OPEN_BRACE + COMMA.join(pairs) + CLOSE_BRACE


def _render_value(value: Value) -> str:
    if isinstance(value, Nested):
        return serialize(value.map)
    return f"{QUOTE}{value.text}{QUOTE}"
