"""warnresult: a result type that carries warnings.

Public API:
    - Success / Failure / Outcome: the two-variant value and its combinators
    - Ok / Err / Result: the plain binary result outcomes collapse into
    - from_result(): lift a binary result into an outcome
    - collect(): fold a sequence of outcomes into one
    - WarningSink / LoggingSink: where rendered warnings go
"""

from __future__ import annotations

import logging

from warnresult.collect import collect
from warnresult.errors import InvalidOutcomeError, WarnResultError
from warnresult.outcome import Failure, Outcome, Success, from_result
from warnresult.result import Err, Ok, Result
from warnresult.sinks import LoggingSink, Renderable, WarningSink
from warnresult.validation import ensure_outcome, explain_invalid_outcome, is_outcome

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("warnresult")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("warnresult").addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "Failure",
    "InvalidOutcomeError",
    "LoggingSink",
    "Ok",
    "Outcome",
    "Renderable",
    "Result",
    "Success",
    "WarnResultError",
    "WarningSink",
    "collect",
    "ensure_outcome",
    "explain_invalid_outcome",
    "from_result",
    "is_outcome",
]
