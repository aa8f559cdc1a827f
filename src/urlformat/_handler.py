"""Route handlers that bind a pattern to a callback.

try_handle() is fire-and-forget: on a match the callback receives the
assembled tuple, otherwise nothing happens and nothing is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from urlformat._matcher import DEFAULT_OPTIONS, Matched, match
from urlformat._tokenizer import tokenize

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from urlformat._kinds import Value
    from urlformat._matcher import MatchOptions, MatchResult
    from urlformat._pattern import Pattern
    from urlformat._shape import ShapeType

logger = logging.getLogger("urlformat")

type Callback = Callable[[tuple[Value, ...]], Any]


@runtime_checkable
class RouteHandler(Protocol):
    """Anything that can be offered an input string."""

    def try_handle(self, text: str, /) -> None: ...


@dataclass(frozen=True, slots=True)
class FormatHandler:
    """A validated pattern plus the callback it dispatches to.

    The pattern is validated at construction time: a shape that cannot fit
    the placeholders raises ShapeError here rather than silently never
    matching later.
    """

    pattern: Pattern
    callback: Callback
    options: MatchOptions = DEFAULT_OPTIONS

    def __post_init__(self) -> None:
        self.pattern.validate()

    def match(self, text: str) -> MatchResult:
        return match(self.pattern, text, self.options)

    def invoke(self, values: tuple[Value, ...]) -> Any:
        return self.callback(values)

    def try_handle(self, text: str, /) -> None:
        """Invoke the callback once if text matches; otherwise do nothing.

        Exceptions raised by the callback propagate to the caller.
        """
        result = self.match(text)
        if isinstance(result, Matched):
            logger.debug("dispatching %r to %r", text, self.pattern.directive)
            self.invoke(result.values)


def register(
    pattern: Pattern,
    callback: Callback,
    *,
    options: MatchOptions | None = None,
) -> FormatHandler:
    """Bind a tokenized pattern to a callback.

    Raises:
        ShapeError: If the pattern's shape does not fit its placeholders.
    """
    return FormatHandler(pattern, callback, options or DEFAULT_OPTIONS)


def url_format(
    directive: str,
    shape: Iterable[ShapeType | type | str],
    callback: Callback,
    *,
    options: MatchOptions | None = None,
) -> FormatHandler:
    """Tokenize a directive and register it in one step.

    >>> seen = []
    >>> h = url_format("item-%i-end", [int], seen.append)
    >>> h.try_handle("item-7-end")
    >>> seen
    [(7,)]
    """
    return register(tokenize(directive, shape), callback, options=options)
