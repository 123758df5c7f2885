"""Data model for OMap Core: values and the ordered map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Union


# ---------------------------------------------------------------------------
# Empty — singleton for missing keys
# ---------------------------------------------------------------------------

class _EmptyType:
    """Sentinel returned when a key cannot be resolved."""

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False


Empty = _EmptyType()


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Leaf:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Nested:
    map: OrderedMap


Value = Union[Leaf, Nested]


# ---------------------------------------------------------------------------
# OrderedMap
# ---------------------------------------------------------------------------

class OrderedMap:
    """Insertion-ordered ``str -> Value`` mapping.

    Re-inserting an existing key replaces its value in place, so iteration
    order is always first-insertion order.
    """

    __slots__ = ("_entries", "_owner")

    def __init__(self) -> None:
        self._entries: dict[str, Value] = {}
        self._owner: OrderedMap | None = None

    # -- Mutation -------------------------------------------------------

    def put(self, key: str, value: Value | OrderedMap | str) -> None:
        """Insert or overwrite *key*.

        Plain strings are wrapped as :class:`Leaf` and maps as
        :class:`Nested`.  A nested map belongs to exactly one parent: a map
        already held by another parent, or by this one under another key,
        is rejected, as is one that would contain its own ancestor.
        """
        if not isinstance(key, str):
            raise TypeError(f"key must be str, not {type(key).__name__}")
        value = _as_value(value)
        previous = self._entries.get(key)

        if isinstance(value, Nested):
            child = value.map
            if _is_ancestor(child, self):
                raise ValueError(f"inserting {key!r} would make the map contain itself")
            if child._owner is not None and not (
                isinstance(previous, Nested) and previous.map is child
            ):
                raise ValueError(f"map for {key!r} already belongs to another parent")
            child._owner = self

        if isinstance(previous, Nested) and not (isinstance(value, Nested) and value.map is previous.map):
            previous.map._owner = None
        self._entries[key] = value

    # -- Access ---------------------------------------------------------

    def get(self, key: str) -> Value | _EmptyType:
        return self._entries.get(key, Empty)

    def iterate(self) -> Iterator[tuple[str, Value]]:
        return iter(self._entries.items())

    items = iterate

    def keys(self) -> Iterator[str]:
        return iter(self._entries)

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries.items())
        return f"OrderedMap({{{inner}}})"

    # -- Conversions ----------------------------------------------------

    def to_json(self) -> str:
        from .writer import serialize
        return serialize(self)

    @classmethod
    def from_json(cls, text: str) -> OrderedMap:
        from .reader import parse
        return parse(text)

    def to_dict(self) -> dict[str, str | dict]:
        """Plain nested ``dict`` view (Leaf -> str, Nested -> dict)."""
        out: dict[str, str | dict] = {}
        for key, value in self._entries.items():
            if isinstance(value, Nested):
                out[key] = value.map.to_dict()
            else:
                out[key] = value.text
        return out

    @classmethod
    def from_dict(cls, mapping: Mapping[str, object]) -> OrderedMap:
        """Build a map from nested mappings of strings."""
        result = cls()
        for key, value in mapping.items():
            if isinstance(value, Mapping):
                result.put(key, cls.from_dict(value))
            else:
                result.put(key, value)  # type: ignore[arg-type]
        return result


def _as_value(value: object) -> Value:
    if isinstance(value, (Leaf, Nested)):
        return value
    if isinstance(value, OrderedMap):
        return Nested(value)
    if isinstance(value, str):
        return Leaf(value)
    raise TypeError(f"value must be str, OrderedMap, Leaf or Nested, not {type(value).__name__}")


def _is_ancestor(candidate: OrderedMap, start: OrderedMap) -> bool:
    """Return True if *candidate* is *start* or one of its owners."""
    current: OrderedMap | None = start
    while current is not None:
        if current is candidate:
            return True
        current = current._owner
    return False
