"""Pattern: an ordered token sequence bound to a target shape."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from urlformat._shape import ShapeError, is_compatible
from urlformat._tokens import Literal, Placeholder

if TYPE_CHECKING:
    from urlformat._shape import ShapeType


@dataclass(frozen=True, slots=True)
class Pattern:
    """Tokens plus the declared output shape.

    tokenize() builds a Pattern without checking it; validate() enforces
    that the shape has exactly one compatible entry per placeholder.
    A validated Pattern is immutable and safe to share between callers.
    """

    directive: str
    tokens: tuple[Literal | Placeholder, ...]
    shape: tuple[ShapeType, ...]

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Placeholder))

    @property
    def literals(self) -> tuple[Literal, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Literal))

    def validate(self) -> None:
        """Check placeholder/shape arity and per-position compatibility.

        Should be called when a handler is registered, not per match.

        Raises:
            ShapeError: On arity mismatch or an incompatible shape entry.
        """
        placeholders = self.placeholders
        if len(placeholders) != len(self.shape):
            msg = (
                f"directive {self.directive!r} has {len(placeholders)} placeholder(s) "
                f"but the shape declares {len(self.shape)} element(s)"
            )
            raise ShapeError(msg)
        for i, (ph, target) in enumerate(zip(placeholders, self.shape, strict=True)):
            if not is_compatible(ph.kind, target):
                msg = (
                    f"placeholder {i} of {self.directive!r} decodes {ph.kind.value} "
                    f"which cannot produce shape type {target.value}"
                )
                raise ShapeError(msg)
