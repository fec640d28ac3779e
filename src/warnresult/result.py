"""Binary result primitives.

The plain success/failure pair that outcomes collapse into. Kept separate
from ``Success``/``Failure`` so the two shapes can never be confused.
"""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful binary result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed binary result, containing the error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


type Result[T, E] = Ok[T] | Err[E]
