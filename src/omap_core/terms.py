"""Quoted-term extraction."""

from __future__ import annotations

from .config import QUOTE
from .errors import MalformedTermError, UnterminatedTermError


def char_at(text: str, pos: int) -> str | None:
    """Return ``text[pos]``, or None outside the text."""
    return text[pos] if 0 <= pos < len(text) else None


def extract_term(text: str, pos: int) -> tuple[str, int]:
    """Read the quoted term starting at *pos*.

    Returns ``(content, consumed)`` where *consumed* counts both quotes.
    Everything between the quotes is taken literally; the first ``"``
    after the opening one closes the term.

    Examples::

        extract_term('""', 0)     → ("", 2)
        extract_term('"hi"', 0)   → ("hi", 4)
        extract_term('x:"ab"', 2) → ("ab", 4)
    """
    found = char_at(text, pos)
    if found != QUOTE:
        raise MalformedTermError(pos, "opening quote", found)

    end = text.find(QUOTE, pos + 1)
    if end == -1:
        raise UnterminatedTermError(len(text), "closing quote")

    content = text[pos + 1:end]
    return content, len(content) + 2
