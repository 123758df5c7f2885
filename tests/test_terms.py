"""Tests for omap_core.terms."""

import pytest

from omap_core.errors import ErrorKind, MalformedTermError, UnterminatedTermError
from omap_core.terms import char_at, extract_term


def test_empty_term():
    assert extract_term('""', 0) == ("", 2)

def test_simple_term():
    assert extract_term('"hi"', 0) == ("hi", 4)

def test_term_at_offset():
    assert extract_term('x:"ab",', 2) == ("ab", 4)

def test_literal_characters_kept():
    assert extract_term('"a\\b{c}"', 0) == ("a\\b{c}", 8)

def test_consumed_is_length_plus_two():
    content, consumed = extract_term('"hello world"rest', 0)
    assert consumed == len(content) + 2

def test_first_inner_quote_closes():
    assert extract_term('"ab"cd"', 0) == ("ab", 4)

def test_unterminated():
    with pytest.raises(UnterminatedTermError) as info:
        extract_term('"hi', 0)
    assert info.value.kind is ErrorKind.UNTERMINATED_TERM

def test_lone_quote_unterminated():
    with pytest.raises(UnterminatedTermError):
        extract_term('"', 0)

def test_missing_opening_quote():
    with pytest.raises(MalformedTermError) as info:
        extract_term("hi", 0)
    assert info.value.position == 0
    assert info.value.found == "h"

def test_position_past_end():
    with pytest.raises(MalformedTermError) as info:
        extract_term('"a"', 3)
    assert info.value.found is None


def test_char_at():
    assert char_at("ab", 1) == "b"
    assert char_at("ab", 2) is None

def test_negative_position():
    with pytest.raises(MalformedTermError) as info:
        extract_term('"a"', -1)
    assert info.value.found is None

def test_char_at_negative():
    assert char_at("ab", -1) is None
