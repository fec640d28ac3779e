"""Structural guards for outcome values."""

from __future__ import annotations

from typing import Any, TypeGuard

from warnresult.errors import HINTS, InvalidOutcomeError
from warnresult.outcome import Outcome, invalid_outcome_reason
from warnresult.result import Err, Ok


def is_outcome(obj: object) -> TypeGuard[Outcome[Any, Any, Any]]:
    """Return True if ``obj`` is a well-formed ``Success`` or ``Failure``.

    Lightweight structural check for narrowing in calling code and tests.
    Use ``explain_invalid_outcome`` for a human-friendly reason string.
    """
    return invalid_outcome_reason(obj) is None


def explain_invalid_outcome(obj: object) -> str | None:
    """Return a concise reason when ``obj`` is not a valid outcome, else None."""
    return invalid_outcome_reason(obj)


def ensure_outcome(obj: object) -> Outcome[Any, Any, Any]:
    """Return ``obj`` unchanged, raising ``InvalidOutcomeError`` if it is not an outcome."""
    reason = invalid_outcome_reason(obj)
    if reason is not None:
        hint = HINTS["lift_result"] if isinstance(obj, Ok | Err) else None
        raise InvalidOutcomeError(reason, hint=hint)
    return obj  # type: ignore[return-value]
