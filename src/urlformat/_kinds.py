"""Parsed-value kinds and their decode rules.

Each placeholder in a directive carries a ValueKind. Decoding turns the raw
substring extracted by the matcher into a typed Python value, or None when the
text does not satisfy the kind's grammar (the None -> no value invariant).

Grammars are compiled with ``google-re2`` and applied with fullmatch, so the
raw text must match exactly: no surrounding whitespace is trimmed.
"""

from __future__ import annotations

import enum
from decimal import Decimal, InvalidOperation

import re2

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Decoded value union. None is reserved for "does not decode".
type Value = str | bool | int | Decimal | float

# Leading zeros are consumed by the grammar; at most 19 significant digits
# reach int(), which bounds the conversion regardless of input length.
_INT_GRAMMAR = re2.compile(r"([+-]?)0*([0-9]{1,19})")
_DECIMAL_GRAMMAR = re2.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_GRAMMAR = re2.compile(r"(?:0[xX])?([0-9a-fA-F]{1,16})")


class HexMode(enum.Enum):
    """How Hex placeholders decode.

    LEGACY reproduces the historical behavior: the text is normalized to carry
    a ``0x`` prefix and then parsed as a base-10 integer, which never succeeds.
    BASE16 reads the digits as a 64-bit two's-complement hexadecimal value.
    """

    LEGACY = "legacy"
    BASE16 = "base16"


class ValueKind(enum.Enum):
    """Scalar kinds a placeholder can extract."""

    STRING = "string"
    CHAR = "char"
    BOOL = "bool"
    INT = "int"
    DECIMAL = "decimal"
    HEX = "hex"

    def decode(self, text: str, hex_mode: HexMode = HexMode.LEGACY) -> Value | None:
        """Decode raw text into this kind's natural type.

        Returns None if the text is not valid for the kind.
        """
        match self:
            case ValueKind.STRING:
                return text
            case ValueKind.CHAR:
                return decode_char(text)
            case ValueKind.BOOL:
                return decode_bool(text)
            case ValueKind.INT:
                return decode_int64(text)
            case ValueKind.DECIMAL:
                return decode_decimal(text)
            case ValueKind.HEX:
                return decode_hex(text, hex_mode)
        return None  # pragma: no cover


def decode_char(text: str) -> str | None:
    if len(text) != 1:
        return None
    return text


def decode_bool(text: str) -> bool | None:
    match text.lower():
        case "true":
            return True
        case "false":
            return False
    return None


def decode_int64(text: str) -> int | None:
    """Signed 64-bit integer parse. Overflow is a failure, not a wrap."""
    m = _INT_GRAMMAR.fullmatch(text)
    if m is None:
        return None
    value = int(m.group(1) + m.group(2))
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def decode_decimal(text: str) -> Decimal | None:
    if _DECIMAL_GRAMMAR.fullmatch(text) is None:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:  # pragma: no cover
        return None


def decode_hex(text: str, mode: HexMode = HexMode.LEGACY) -> int | None:
    """Decode a Hex placeholder according to mode.

    In LEGACY mode the normalized ``0x...`` text goes through the base-10
    integer parse, so every input is rejected.
    """
    if mode is HexMode.LEGACY:
        lowered = text.lower()
        normalized = lowered if lowered.startswith("0x") else "0x" + lowered
        return decode_int64(normalized)

    m = _HEX_GRAMMAR.fullmatch(text)
    if m is None:
        return None
    value = int(m.group(1), 16)
    if value > INT64_MAX:
        value -= 2**64
    return value
