"""Target shapes: the declared output type of each placeholder.

A shape is resolved once, when a pattern is built, into a tuple of ShapeType
tags. Matching then coerces every decoded value into its tag's type.

| kind    | allowed shape types                       |
|---------|-------------------------------------------|
| STRING  | STR, CHAR                                 |
| CHAR    | CHAR, STR                                 |
| BOOL    | BOOL                                      |
| INT     | INT64, INT32, UINT32, DECIMAL, FLOAT      |
| DECIMAL | DECIMAL, FLOAT                            |
| HEX     | INT64, INT32, UINT32                      |
"""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from urlformat._kinds import ValueKind, decode_char

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlformat._kinds import Value


class ShapeType(enum.Enum):
    """Declared element type of a target shape."""

    STR = "str"
    CHAR = "char"
    BOOL = "bool"
    INT64 = "int64"
    INT32 = "int32"
    UINT32 = "uint32"
    DECIMAL = "decimal"
    FLOAT = "float"


class Narrowing(enum.Enum):
    """What happens when an integer does not fit an INT32/UINT32 element.

    WRAP truncates silently (two's complement). CHECKED treats it as a failure.
    """

    WRAP = "wrap"
    CHECKED = "checked"


# Python types accepted as shape entries.
_PY_TYPES: dict[type, ShapeType] = {
    str: ShapeType.STR,
    bool: ShapeType.BOOL,
    int: ShapeType.INT64,
    float: ShapeType.FLOAT,
    Decimal: ShapeType.DECIMAL,
}

_ALIASES: dict[str, ShapeType] = {
    "string": ShapeType.STR,
    "int": ShapeType.INT64,
    "long": ShapeType.INT64,
    "uint": ShapeType.UINT32,
}

COMPATIBLE: dict[ValueKind, frozenset[ShapeType]] = {
    ValueKind.STRING: frozenset({ShapeType.STR, ShapeType.CHAR}),
    ValueKind.CHAR: frozenset({ShapeType.CHAR, ShapeType.STR}),
    ValueKind.BOOL: frozenset({ShapeType.BOOL}),
    ValueKind.INT: frozenset(
        {ShapeType.INT64, ShapeType.INT32, ShapeType.UINT32, ShapeType.DECIMAL, ShapeType.FLOAT}
    ),
    ValueKind.DECIMAL: frozenset({ShapeType.DECIMAL, ShapeType.FLOAT}),
    ValueKind.HEX: frozenset({ShapeType.INT64, ShapeType.INT32, ShapeType.UINT32}),
}


class FormatError(Exception):
    """Errors from building a pattern or handler."""


class ShapeError(FormatError):
    """A target shape does not fit the placeholders of a pattern."""


class UnknownShapeTypeError(ShapeError):
    """A shape entry could not be resolved to a ShapeType."""

    def __init__(self, entry: Any) -> None:
        self.entry = entry
        names = ", ".join(t.value for t in ShapeType)
        super().__init__(f"unknown shape type: {entry!r} (expected one of: {names})")


def resolve_shape_type(entry: ShapeType | type | str) -> ShapeType:
    """Resolve a single shape entry.

    Raises:
        UnknownShapeTypeError: If the entry is not a recognized type tag.
    """
    if isinstance(entry, ShapeType):
        return entry
    if isinstance(entry, type):
        resolved = _PY_TYPES.get(entry)
        if resolved is None:
            raise UnknownShapeTypeError(entry)
        return resolved
    if isinstance(entry, str):
        name = entry.strip().lower()
        if name in _ALIASES:
            return _ALIASES[name]
        try:
            return ShapeType(name)
        except ValueError:
            raise UnknownShapeTypeError(entry) from None
    raise UnknownShapeTypeError(entry)


def resolve_shape(shape: Iterable[ShapeType | type | str]) -> tuple[ShapeType, ...]:
    """Resolve every entry of a target shape, preserving order."""
    return tuple(resolve_shape_type(entry) for entry in shape)


def is_compatible(kind: ValueKind, target: ShapeType) -> bool:
    return target in COMPATIBLE[kind]


def wrap_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def wrap_uint32(value: int) -> int:
    return value % 2**32


def coerce(value: Value, target: ShapeType, narrowing: Narrowing = Narrowing.WRAP) -> Value | None:
    """Convert a decoded value into the target shape type.

    Returns None when the value cannot take the target type (a CHAR target
    given a string longer than one character, or an out-of-range integer
    under CHECKED narrowing).
    """
    # bool is an int subclass but never takes a numeric shape.
    is_int = isinstance(value, int) and not isinstance(value, bool)
    match target:
        case ShapeType.INT32 if is_int:
            narrowed = wrap_int32(value)
            if narrowing is Narrowing.CHECKED and narrowed != value:
                return None
            return narrowed
        case ShapeType.UINT32 if is_int:
            narrowed = wrap_uint32(value)
            if narrowing is Narrowing.CHECKED and narrowed != value:
                return None
            return narrowed
        case ShapeType.CHAR if isinstance(value, str):
            return decode_char(value)
        case ShapeType.DECIMAL if is_int:
            return Decimal(value)
        case ShapeType.FLOAT if is_int or isinstance(value, Decimal):
            return float(value)
    return value
