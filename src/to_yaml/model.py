"""Data model for encoder input: keys, value kinds and classification."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from numbers import Real
from typing import Any


# ---------------------------------------------------------------------------
# Symbol: atom-like key wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Symbol:
    """A symbolic identifier, used as a key alongside plain strings."""

    name: str

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# ValueKind
# ---------------------------------------------------------------------------

class ValueKind(Enum):
    Mapping = auto()
    Sequence = auto()
    Text = auto()
    Number = auto()
    Other = auto()


_TEXT_LIKE = (str, bytes, bytearray)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """True for lists, tuples and other sequences that are not text."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_LIKE)


def is_number(value: Any) -> bool:
    """True for real numbers; complex values have no YAML number form."""
    # bool is an int subclass but renders as true/false
    if isinstance(value, bool):
        return False
    return isinstance(value, (Real, Decimal))


def classify(value: Any) -> ValueKind:
    """Return the kind that decides how *value* is rendered.

    - Mapping   → nested block mapping
    - Sequence  → block sequence (str/bytes excluded)
    - str/bytes → Text
    - Real, Decimal → Number (bool excluded)
    - anything else → Other
    """
    if is_mapping(value):
        return ValueKind.Mapping
    if is_sequence(value):
        return ValueKind.Sequence
    if isinstance(value, _TEXT_LIKE):
        return ValueKind.Text
    if is_number(value):
        return ValueKind.Number
    return ValueKind.Other
