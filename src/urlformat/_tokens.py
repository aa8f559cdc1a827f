"""Token model: literal text and typed placeholders.

A directive tokenizes into a sequence of these two shapes. Each token is a
frozen dataclass and knows how to convert a candidate substring.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import re2

from urlformat._kinds import HexMode, ValueKind

if TYPE_CHECKING:
    from urlformat._kinds import Value


@dataclass(frozen=True, slots=True)
class Literal:
    """Text that must appear verbatim (case-insensitively) in the input.

    The search pattern is compiled at construction time via ``google-re2``,
    so offsets are reported on the original input without lowercasing it.
    """

    text: str
    _search: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_search", re2.compile("(?i)" + re2.escape(self.text)))

    def find(self, text: str, pos: int = 0) -> tuple[int, int] | None:
        """Locate the first occurrence at or after pos.

        Returns the (start, end) span, or None if the literal is absent.
        """
        if not self.text:
            return (pos, pos)
        m = self._search.search(text, pos)
        if m is None:
            return None
        return m.span()

    def convert(self, text: str) -> str | None:
        """Accept exactly this literal's text, ignoring case."""
        m = self._search.fullmatch(text)
        if m is None:
            return None
        return text


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A typed extraction point."""

    kind: ValueKind

    def convert(self, text: str, hex_mode: HexMode = HexMode.LEGACY) -> Value | None:
        """Decode text per this placeholder's kind. None means it does not decode."""
        return self.kind.decode(text, hex_mode)


type Token = Literal | Placeholder
