"""Test utilities for urlformat.

Provides a recording callback for use in tests and examples, so handlers
can be exercised without writing a throwaway function each time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from urlformat._kinds import Value


@dataclass(slots=True)
class CallRecorder:
    """A callback that remembers every tuple it was called with.

    >>> from urlformat import url_format
    >>> from urlformat.testing import CallRecorder
    >>> rec = CallRecorder()
    >>> url_format("%s/%s", [str, str], rec).try_handle("a/b")
    >>> rec.calls
    [('a', 'b')]
    """

    calls: list[tuple[Value, ...]] = field(default_factory=list)

    def __call__(self, values: tuple[Value, ...]) -> None:
        self.calls.append(values)

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def last(self) -> tuple[Value, ...] | None:
        return self.calls[-1] if self.calls else None

    def reset(self) -> None:
        self.calls.clear()
