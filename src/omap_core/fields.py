"""Field collection: structured values -> OrderedMap."""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, runtime_checkable

from .errors import FieldCollectionError
from .model import Leaf, Nested, OrderedMap, Value
from .writer import serialize

logger = logging.getLogger(__name__)


@runtime_checkable
class FieldSource(Protocol):
    """A value that lists its own named fields, in a fixed order."""

    def iter_fields(self) -> Iterable[tuple[str, object]]: ...


def to_ordered_map(source: FieldSource) -> OrderedMap:
    """Collect the fields of *source* into an OrderedMap.

    - nested FieldSource → Leaf holding its serialized text
    - OrderedMap         → Nested
    - str                → Leaf as-is
    - other scalars      → Leaf(str(value))
    """
    result = OrderedMap()
    for name, raw in source.iter_fields():
        if name in result:
            raise FieldCollectionError(name, "duplicate field name")
        result.put(name, _field_value(name, raw))
    logger.debug("collected %d fields from %s", result.size(), type(source).__name__)
    return result


def _field_value(name: str, raw: object) -> Value:
    if raw is None:
        raise FieldCollectionError(name, "value is None")
    if isinstance(raw, (Leaf, Nested)):
        return raw
    if isinstance(raw, OrderedMap):
        return Nested(raw)
    if isinstance(raw, str):
        return Leaf(raw)
    if isinstance(raw, FieldSource):
        try:
            return Leaf(serialize(to_ordered_map(raw)))
        except Exception as exc:
            raise FieldCollectionError(name, f"failed to convert nested value: {exc}") from exc
    return Leaf(str(raw))
