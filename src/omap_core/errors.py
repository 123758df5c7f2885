"""Exception hierarchy for OMap Core.

Every parse failure carries an :class:`ErrorKind`, the absolute position in
the input text, the token that was expected there and what was found
instead, so callers can branch on ``exc.kind`` rather than on messages::

    try:
        m = parse(text)
    except ParseError as exc:
        if exc.kind is ErrorKind.EXPECTED_COLON:
            ...
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    EXPECTED_OBJECT_START = "expected_object_start"
    MALFORMED_TERM = "malformed_term"
    UNTERMINATED_TERM = "unterminated_term"
    EXPECTED_COLON = "expected_colon"
    UNSUPPORTED_VALUE_TYPE = "unsupported_value_type"
    MALFORMED_OBJECT_STRUCTURE = "malformed_object_structure"
    NESTING_TOO_DEEP = "nesting_too_deep"


class OMapCoreError(Exception):
    """Base class for all OMap Core errors."""


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------

class ParseError(OMapCoreError, ValueError):
    kind: ErrorKind

    def __init__(self, position: int, expected: str, found: str | None = None) -> None:
        self.position = position
        self.expected = expected
        self.found = found
        where = "end of input" if found is None else repr(found)
        super().__init__(f"expected {expected} at position {position}, found {where}")


class ExpectedObjectStartError(ParseError):
    kind = ErrorKind.EXPECTED_OBJECT_START


class MalformedTermError(ParseError):
    kind = ErrorKind.MALFORMED_TERM


class UnterminatedTermError(ParseError):
    kind = ErrorKind.UNTERMINATED_TERM


class ExpectedColonError(ParseError):
    kind = ErrorKind.EXPECTED_COLON


class UnsupportedValueTypeError(ParseError):
    kind = ErrorKind.UNSUPPORTED_VALUE_TYPE


class MalformedObjectStructureError(ParseError):
    kind = ErrorKind.MALFORMED_OBJECT_STRUCTURE


class NestingTooDeepError(ParseError):
    kind = ErrorKind.NESTING_TOO_DEEP


# ---------------------------------------------------------------------------
# Field collection
# ---------------------------------------------------------------------------

class FieldCollectionError(OMapCoreError):
    """A field source could not be turned into an OrderedMap."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"field {field!r}: {message}")


# ---------------------------------------------------------------------------
# Payment domain
# ---------------------------------------------------------------------------

class PaymentError(Exception):
    """Raised when a payment for an order cannot go through."""


class SuspiciousTransactionError(PaymentError):
    def __init__(self) -> None:
        super().__init__("ERROR: Suspicious Transaction Report!")
