"""Directive tokenizer.

Turns a printf-style directive into literal and placeholder tokens:

| specifier                  | token                   |
|----------------------------|-------------------------|
| ``%%``                     | Literal("%")            |
| ``%b``                     | Placeholder(BOOL)       |
| ``%i`` ``%u`` ``%d``       | Placeholder(INT)        |
| ``%c`` ``%s``              | Placeholder(STRING)     |
| ``%e %E %f %F %g %G``      | Placeholder(DECIMAL)    |
| ``%x`` ``%X``              | Placeholder(HEX)        |

Everything else is literal text. Tokenizing never fails: an unknown
specifier such as ``%z`` simply stays in the surrounding literal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from urlformat._kinds import ValueKind
from urlformat._pattern import Pattern
from urlformat._shape import resolve_shape
from urlformat._tokens import Literal, Placeholder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from urlformat._shape import ShapeType
    from urlformat._tokens import Token

MARKER = "%"

SPECIFIERS: dict[str, Token] = {
    "%": Literal("%"),
    "b": Placeholder(ValueKind.BOOL),
    "i": Placeholder(ValueKind.INT),
    "u": Placeholder(ValueKind.INT),
    "d": Placeholder(ValueKind.INT),
    "c": Placeholder(ValueKind.STRING),
    "s": Placeholder(ValueKind.STRING),
    "e": Placeholder(ValueKind.DECIMAL),
    "E": Placeholder(ValueKind.DECIMAL),
    "f": Placeholder(ValueKind.DECIMAL),
    "F": Placeholder(ValueKind.DECIMAL),
    "g": Placeholder(ValueKind.DECIMAL),
    "G": Placeholder(ValueKind.DECIMAL),
    "x": Placeholder(ValueKind.HEX),
    "X": Placeholder(ValueKind.HEX),
}


def tokenize_directive(directive: str) -> tuple[Token, ...]:
    """Split a directive into tokens, one character at a time.

    Plain text accumulates in a buffer that is flushed as a Literal when the
    next character is a marker, except when that marker is the final
    character of the directive. A buffer starting with a marker and a known
    specifier becomes the specifier's token.
    """
    tokens: list[Token] = []
    buffer: list[str] = []
    pos = 0
    end = len(directive)

    while pos < end:
        buffer.append(directive[pos])
        pos += 1

        if len(buffer) == 2 and buffer[0] == MARKER and buffer[1] in SPECIFIERS:
            tokens.append(SPECIFIERS[buffer[1]])
            buffer.clear()
            continue

        # Only look ahead when at least two characters remain.
        if pos < end - 1 and directive[pos] == MARKER:
            tokens.append(Literal("".join(buffer)))
            buffer.clear()

    if buffer:
        tokens.append(Literal("".join(buffer)))
    return tuple(tokens)


def tokenize(directive: str, shape: Iterable[ShapeType | type | str] = ()) -> Pattern:
    """Tokenize a directive and attach its target shape.

    Arity and compatibility are not checked here; call Pattern.validate()
    (register() does) to fail fast on a shape that cannot fit.

    Raises:
        UnknownShapeTypeError: If a shape entry is not a recognized type.
    """
    return Pattern(
        directive=directive,
        tokens=tokenize_directive(directive),
        shape=resolve_shape(shape),
    )
