"""Exception hierarchy for warnresult.

Error payloads carried by a ``Failure`` are data and are never raised. The
exceptions below signal misuse of the API itself.
"""

from __future__ import annotations


class WarnResultError(Exception):
    """Base exception for all warnresult errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class InvalidOutcomeError(WarnResultError):
    """A value that should be an outcome (or a binary result) is not one."""


# --- Actionable Hints ---

HINTS = {
    "lift_result": "Lift binary results with from_result() before combining them.",
    "wrap_warning": "Wrap a single warning in a list: Success(value, [warning]).",
    "callback_outcome": (
        "Callbacks passed to and_then()/or_else() must return Success or Failure."
    ),
    "warning_level": "Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
}
