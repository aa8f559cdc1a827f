"""Matcher: structural segmentation, decoding and shape coercion.

Matching runs in two phases:

1. segment() walks the tokens left to right against a cursor over the input.
   Each literal is located by its first case-insensitive occurrence after the
   cursor; the text skipped to reach it becomes the raw value of the
   placeholder that precedes it. A trailing placeholder takes the rest of the
   input. There is no backtracking: a literal is never searched for again.
2. match() decodes each raw value per its placeholder kind and coerces it to
   the declared shape type, honoring the MatchOptions policy.

All working state is local to a call, so a Pattern can be matched from many
threads at once.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from urlformat._kinds import HexMode
from urlformat._shape import Narrowing, ShapeType, coerce, is_compatible
from urlformat._tokens import Literal, Placeholder

if TYPE_CHECKING:
    from urlformat._kinds import Value
    from urlformat._pattern import Pattern

logger = logging.getLogger("urlformat")


class MatchPolicy(enum.Enum):
    """What a decode failure does to the whole match.

    STRICT rejects the input. LENIENT drops the failed element and returns
    the remaining values, so the result can be shorter than the shape.
    """

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Per-handler matching policy."""

    policy: MatchPolicy = MatchPolicy.STRICT
    hex_mode: HexMode = HexMode.LEGACY
    narrowing: Narrowing = Narrowing.WRAP


DEFAULT_OPTIONS = MatchOptions()


class NoMatchReason(enum.Enum):
    """Why an input was rejected. Informational only."""

    LITERAL_NOT_FOUND = "literal_not_found"
    UNEXPECTED_TEXT = "unexpected_text"
    EMPTY_VALUE = "empty_value"
    TRAILING_INPUT = "trailing_input"
    ARITY = "arity"
    SHAPE = "shape"
    DECODE = "decode"
    NARROWING = "narrowing"


@dataclass(frozen=True, slots=True)
class Matched:
    """The input conforms; values are ordered like the target shape."""

    values: tuple[Value, ...]

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NoMatch:
    """The input does not conform."""

    reason: NoMatchReason
    detail: str = ""

    def __bool__(self) -> bool:
        return False


type MatchResult = Matched | NoMatch


def _is_utf8(text: str) -> bool:
    # re2 encodes its subject as UTF-8; lone surrogates cannot be.
    if text.isascii():
        return True
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def segment(pattern: Pattern, text: str) -> tuple[str, ...] | NoMatch:
    """Cut the input into one raw substring per placeholder.

    Returns the raw substrings in placeholder order, or a NoMatch describing
    the first structural failure.
    """
    if not _is_utf8(text):
        return NoMatch(NoMatchReason.DECODE, "input is not encodable as UTF-8")

    raw: list[str] = []
    pending = False  # a placeholder is waiting for the next literal
    pos = 0
    last = len(pattern.tokens) - 1

    for i, token in enumerate(pattern.tokens):
        match token:
            case Literal(text=literal):
                span = token.find(text, pos)
                if span is None:
                    return NoMatch(
                        NoMatchReason.LITERAL_NOT_FOUND,
                        f"literal {literal!r} not found after offset {pos}",
                    )
                start, stop = span
                if start > pos:
                    if not pending:
                        return NoMatch(
                            NoMatchReason.UNEXPECTED_TEXT,
                            f"unexpected text {text[pos:start]!r} before literal {literal!r}",
                        )
                    raw.append(text[pos:start])
                elif pending:
                    return NoMatch(
                        NoMatchReason.EMPTY_VALUE,
                        f"placeholder {len(raw)} is empty before literal {literal!r}",
                    )
                pending = False
                pos = stop
            case Placeholder():
                if pending:
                    return NoMatch(
                        NoMatchReason.ARITY,
                        f"placeholder {len(raw)} is not separated from the next by a literal",
                    )
                if i == last:
                    # Takes the rest of the input, even when empty.
                    raw.append(text[pos:])
                    return tuple(raw)
                pending = True

    if pos < len(text):
        return NoMatch(
            NoMatchReason.TRAILING_INPUT,
            f"unmatched trailing text {text[pos:]!r}",
        )
    return tuple(raw)


def match(pattern: Pattern, text: str, options: MatchOptions = DEFAULT_OPTIONS) -> MatchResult:
    """Match an input against a pattern.

    Never raises for a non-conforming input; the outcome is a NoMatch.
    """
    result = _match(pattern, text, options)
    if isinstance(result, NoMatch):
        logger.debug(
            "no match for %r against %r: %s (%s)",
            text,
            pattern.directive,
            result.reason.value,
            result.detail,
        )
    return result


def _match(pattern: Pattern, text: str, options: MatchOptions) -> MatchResult:
    raw = segment(pattern, text)
    if isinstance(raw, NoMatch):
        return raw

    placeholders = pattern.placeholders
    if not len(raw) == len(placeholders) == len(pattern.shape):
        return NoMatch(
            NoMatchReason.ARITY,
            f"extracted {len(raw)} value(s) for {len(placeholders)} placeholder(s) "
            f"and a shape of {len(pattern.shape)}",
        )

    values: list[Value] = []
    for i, (piece, ph, target) in enumerate(zip(raw, placeholders, pattern.shape, strict=True)):
        if not is_compatible(ph.kind, target):
            return NoMatch(
                NoMatchReason.SHAPE,
                f"placeholder {i} decodes {ph.kind.value}, shape expects {target.value}",
            )

        failure: NoMatch | None = None
        decoded = ph.convert(piece, options.hex_mode)
        if decoded is None:
            failure = NoMatch(
                NoMatchReason.DECODE,
                f"placeholder {i}: {piece!r} is not a valid {ph.kind.value}",
            )
        else:
            value = coerce(decoded, target, options.narrowing)
            if value is None:
                reason = (
                    NoMatchReason.NARROWING
                    if target in (ShapeType.INT32, ShapeType.UINT32)
                    else NoMatchReason.DECODE
                )
                failure = NoMatch(
                    reason, f"placeholder {i}: {piece!r} does not fit {target.value}"
                )
            else:
                values.append(value)

        if failure is not None:
            if options.policy is MatchPolicy.STRICT:
                return failure
            logger.debug("dropping value: %s", failure.detail)

    return Matched(tuple(values))
