"""OMap Core — ordered map with a restricted JSON-like text form."""

from .model import Empty, Leaf, Nested, OrderedMap, Value
from .terms import extract_term
from .writer import serialize
from .reader import parse, parse_object
from .fields import FieldSource, to_ordered_map
from .getter import lookup
from .errors import (
    ErrorKind,
    ExpectedColonError,
    ExpectedObjectStartError,
    FieldCollectionError,
    MalformedObjectStructureError,
    MalformedTermError,
    NestingTooDeepError,
    OMapCoreError,
    ParseError,
    PaymentError,
    SuspiciousTransactionError,
    UnsupportedValueTypeError,
    UnterminatedTermError,
)
from .repl import OMapRepl

__all__ = [
    "parse",
    "parse_object",
    "serialize",
    "extract_term",
    "lookup",
    "to_ordered_map",
    "FieldSource",
    "OrderedMap",
    "Leaf",
    "Nested",
    "Value",
    "Empty",
    "ErrorKind",
    "OMapCoreError",
    "ParseError",
    "ExpectedObjectStartError",
    "MalformedTermError",
    "UnterminatedTermError",
    "ExpectedColonError",
    "UnsupportedValueTypeError",
    "MalformedObjectStructureError",
    "NestingTooDeepError",
    "FieldCollectionError",
    "PaymentError",
    "SuspiciousTransactionError",
    "OMapRepl",
]
