"""Tests for omap_core.model."""

import pytest

from omap_core.model import Empty, Leaf, Nested, OrderedMap, _EmptyType


class TestEmpty:
    def test_singleton(self):
        assert Empty is _EmptyType()

    def test_falsy(self):
        assert not Empty

    def test_repr(self):
        assert repr(Empty) == "Empty"


class TestPutGet:
    def test_put_wraps_str(self):
        m = OrderedMap()
        m.put("a", "1")
        assert m.get("a") == Leaf("1")

    def test_put_wraps_map(self):
        inner = OrderedMap()
        inner.put("x", "y")
        m = OrderedMap()
        m.put("in", inner)
        assert m.get("in") == Nested(inner)

    def test_put_accepts_values(self):
        m = OrderedMap()
        m.put("a", Leaf("1"))
        assert m.get("a") == Leaf("1")

    def test_missing_key_returns_empty(self):
        assert OrderedMap().get("nope") is Empty

    def test_rejects_other_values(self):
        with pytest.raises(TypeError):
            OrderedMap().put("a", 1)

    def test_rejects_non_str_key(self):
        with pytest.raises(TypeError):
            OrderedMap().put(1, "a")

    def test_rejects_self_reference(self):
        m = OrderedMap()
        with pytest.raises(ValueError):
            m.put("me", m)

    def test_rejects_indirect_cycle(self):
        outer = OrderedMap()
        inner = OrderedMap()
        outer.put("inner", inner)
        with pytest.raises(ValueError):
            inner.put("outer", outer)


class TestOrder:
    def test_overwrite_keeps_position(self):
        m = OrderedMap()
        m.put("b", "1")
        m.put("a", "2")
        m.put("b", "3")
        assert list(m.keys()) == ["b", "a"]
        assert m.get("b") == Leaf("3")
        assert m.size() == 2

    def test_iterate_is_restartable(self):
        m = OrderedMap()
        m.put("x", "1")
        m.put("y", "2")
        assert list(m.iterate()) == list(m.iterate())
        assert [k for k, _ in m.items()] == ["x", "y"]

    def test_len_and_contains(self):
        m = OrderedMap()
        m.put("x", "1")
        assert len(m) == 1
        assert "x" in m
        assert "y" not in m
        assert list(m) == ["x"]


class TestEquality:
    def test_order_matters(self):
        a = OrderedMap()
        a.put("x", "1")
        a.put("y", "2")
        b = OrderedMap()
        b.put("y", "2")
        b.put("x", "1")
        assert a != b

    def test_nested_equal(self):
        a = OrderedMap.from_dict({"u": {"n": "Bob"}})
        b = OrderedMap.from_dict({"u": {"n": "Bob"}})
        assert a == b


class TestConversions:
    def test_to_dict(self):
        m = OrderedMap.from_dict({"a": "1", "b": {"c": "2"}})
        assert m.to_dict() == {"a": "1", "b": {"c": "2"}}

    def test_json_methods(self):
        m = OrderedMap.from_json('{"a":{"b":"c"}}')
        assert m.to_json() == '{"a":{"b":"c"}}'

    def test_repr(self):
        m = OrderedMap()
        m.put("a", "1")
        assert repr(m) == "OrderedMap({'a': Leaf(text='1')})"


class TestOwnership:
    def test_shared_child_rejected(self):
        child = OrderedMap()
        a = OrderedMap()
        b = OrderedMap()
        a.put("x", child)
        with pytest.raises(ValueError, match="another parent"):
            b.put("y", child)
        assert "y" not in b

    def test_same_parent_other_key_rejected(self):
        child = OrderedMap()
        a = OrderedMap()
        a.put("x", child)
        with pytest.raises(ValueError):
            a.put("y", child)

    def test_reput_under_same_key(self):
        child = OrderedMap()
        a = OrderedMap()
        a.put("x", child)
        a.put("x", child)
        assert a.get("x") == Nested(child)

    def test_overwrite_releases_child(self):
        child = OrderedMap()
        a = OrderedMap()
        a.put("x", child)
        a.put("x", "leaf")
        b = OrderedMap()
        b.put("y", child)
        assert b.get("y") == Nested(child)

    def test_cycle_through_grandparent(self):
        top = OrderedMap()
        mid = OrderedMap()
        low = OrderedMap()
        top.put("mid", mid)
        mid.put("low", low)
        with pytest.raises(ValueError, match="contain itself"):
            low.put("top", top)

    def test_parsed_children_have_owner(self):
        m = OrderedMap.from_json('{"a":{"b":{}}}')
        with pytest.raises(ValueError):
            OrderedMap().put("stolen", m.get("a").map)
