"""Encoder: ordered mapping tree → block-style YAML text."""

from __future__ import annotations

import functools
import logging
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from numbers import Integral
from typing import Any

from .errors import EmptyMappingInSequence, InvalidInputKind, UnsupportedKeyType
from .indentation import Indenter, check_depth, default_indenter
from .model import Symbol, ValueKind, classify, is_mapping

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Scalar formatting
# ---------------------------------------------------------------------------

def key_text(key: Any) -> str:
    """Display string for a mapping key; keys are never quoted."""
    if isinstance(key, str):
        return key
    if isinstance(key, Symbol):
        return key.name
    raise UnsupportedKeyType(key)


def quote_if_needed(text: str) -> str:
    """Double-quote *text* verbatim when it contains a space or a colon."""
    if " " in text or ":" in text:
        return f'"{text}"'
    return text


def decimal_text(number: Any) -> str:
    """Decimal text for a real number that YAML reads back as a number.

    - Integral → plain digits
    - non-finite → .inf / -.inf / .nan
    - float exponents always carry a dotted mantissa (1.0e+20)
    - Fraction and other rationals go through float
    """
    if isinstance(number, Decimal):
        return _decimal_text(number)
    if isinstance(number, Integral):
        return str(int(number))
    return _float_text(float(number))


def _float_text(number: float) -> str:
    if math.isnan(number):
        return ".nan"
    if math.isinf(number):
        return ".inf" if number > 0 else "-.inf"
    text = repr(number)
    mantissa, sep, exponent = text.partition("e")
    if sep and "." not in mantissa:
        return f"{mantissa}.0e{exponent}"
    return text


def _decimal_text(number: Decimal) -> str:
    if not number.is_finite():
        return _float_text(float(number))
    text = str(number)
    if "E" in text:
        return format(number, "f")
    return text


def text_value(value: str | bytes | bytearray) -> str:
    """Text for a Text-kind value; bytes are decoded as UTF-8."""
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return value


def best_effort_text(value: Any) -> str:
    """Text for values that are neither collections, strings nor numbers.

    - bool   → true / false
    - None   → null
    - Symbol → its name
    - other  → str(value)
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Symbol):
        return value.name
    return str(value)


# ---------------------------------------------------------------------------
# Encoder
# ---------------------------------------------------------------------------

class Encoder:
    """Renders mapping trees with a fixed Indenter.

    Without an explicit indenter it uses the process-wide one, so it follows
    ``configure()`` like the module-level functions. Output is collected as
    a flat list of fragments and joined once per public call.
    """

    __slots__ = ("indenter",)

    def __init__(self, indenter: Indenter | None = None) -> None:
        self.indenter = indenter if indenter is not None else default_indenter()

    # -- Public API -----------------------------------------------------

    def encode(self, tree: Mapping) -> str:
        return self.encode_at(0, tree)

    def encode_at(self, depth: int, tree: Mapping) -> str:
        return "".join(self.encode_chunks(tree, depth))

    def encode_chunks(self, tree: Mapping, depth: int = 0) -> list[str]:
        """Return the text fragments that make up ``encode_at(depth, tree)``."""
        check_depth(depth)
        if not is_mapping(tree):
            raise InvalidInputKind(tree)
        logger.debug("encoding mapping with %d entries at depth %d", len(tree), depth)
        out: list[str] = []
        self._emit_mapping(out, depth, tree)
        return out

    def render_value(self, depth: int, value: Any) -> str:
        out: list[str] = []
        self._emit_value(out, check_depth(depth), value)
        return "".join(out)

    def render_sequence(self, depth: int, items: Sequence) -> str:
        out: list[str] = []
        self._emit_sequence(out, check_depth(depth), items)
        return "".join(out)

    # -- Emitters -------------------------------------------------------

    def _emit_mapping(self, out: list[str], depth: int, tree: Mapping) -> None:
        pad = self.indenter(depth)
        for key, value in tree.items():
            out.append(pad)
            out.append(key_text(key))
            out.append(":")
            self._emit_value(out, depth, value)

    def _emit_value(self, out: list[str], depth: int, value: Any) -> None:
        kind = classify(value)
        if kind is ValueKind.Mapping:
            out.append("\n")
            self._emit_mapping(out, depth + 1, value)
        elif kind is ValueKind.Sequence:
            out.append("\n")
            self._emit_sequence(out, depth, value)
        elif kind is ValueKind.Text:
            out.extend((" ", quote_if_needed(text_value(value)), "\n"))
        elif kind is ValueKind.Number:
            out.extend((" ", decimal_text(value), "\n"))
        else:  # ValueKind.Other
            out.extend((" ", best_effort_text(value), "\n"))

    def _emit_sequence(self, out: list[str], depth: int, items: Sequence) -> None:
        item_pad = self.indenter(depth + 1)
        for index, item in enumerate(items):
            if not is_mapping(item):
                out.append(item_pad)
                out.append("-")
                self._emit_value(out, depth + 1, item)
                continue

            pairs = iter(item.items())
            try:
                first_key, first_value = next(pairs)
            except StopIteration:
                raise EmptyMappingInSequence(index) from None

            # Dash sits on the first key; the rest align one level deeper
            out.append(item_pad)
            out.append("- ")
            out.append(key_text(first_key))
            out.append(":")
            self._emit_value(out, depth + 1, first_value)

            rest_pad = self.indenter(depth + 2)
            for key, value in pairs:
                out.append(rest_pad)
                out.append(key_text(key))
                out.append(":")
                self._emit_value(out, depth + 2, value)


# ---------------------------------------------------------------------------
# Module-level API (process-wide indentation)
# ---------------------------------------------------------------------------

@functools.lru_cache(maxsize=1)
def default_encoder() -> Encoder:
    return Encoder(default_indenter())


def encode(tree: Mapping) -> str:
    """Encode *tree* as a depth-0 YAML document.

    Example::

        encode({"hello": "world", Symbol("port"): 80})
        # → "hello: world\\nport: 80\\n"
    """
    return default_encoder().encode(tree)


def encode_at(depth: int, tree: Mapping) -> str:
    """Encode *tree* with every top-level key indented to *depth*."""
    return default_encoder().encode_at(depth, tree)


def encode_chunks(tree: Mapping, depth: int = 0) -> list[str]:
    return default_encoder().encode_chunks(tree, depth)


def render_value(depth: int, value: Any) -> str:
    """Render the part of an entry that follows ``key:``."""
    return default_encoder().render_value(depth, value)


def render_sequence(depth: int, items: Sequence) -> str:
    return default_encoder().render_sequence(depth, items)
