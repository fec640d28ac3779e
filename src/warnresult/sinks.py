"""Diagnostic sinks for rendering warnings.

Only the ``*_logging_warnings*`` collapse operations touch a sink; every
other operation is sink-agnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol, runtime_checkable

from warnresult._dev_flags import warning_level

log = logging.getLogger(__name__)


@runtime_checkable
class Renderable(Protocol):
    """Anything that can be displayed as text."""

    def __str__(self) -> str: ...


@runtime_checkable
class WarningSink(Protocol):
    """Duck-typed protocol for warning sinks."""

    def emit(self, warning: Renderable) -> None: ...  # noqa: D102


@dataclass(frozen=True, slots=True)
class LoggingSink:
    """Write each warning as one log record.

    Defaults to this module's logger at the level resolved from
    ``WARNRESULT_WARNING_LEVEL`` (``WARNING`` when unset).

    Example:
        outcome.unwrap_logging_warnings_or(0, sink=LoggingSink(level=logging.INFO))
    """

    logger: logging.Logger | None = None
    level: int | None = None

    def __post_init__(self) -> None:
        if self.logger is None:
            object.__setattr__(self, "logger", log)
        if self.level is None:
            object.__setattr__(self, "level", warning_level())

    def emit(self, warning: Renderable) -> None:
        self.logger.log(self.level, "%s", warning)  # type: ignore[union-attr, arg-type]


def resolve_sink(sink: WarningSink | None) -> WarningSink:
    """Return ``sink`` or a fresh default ``LoggingSink``."""
    return sink if sink is not None else LoggingSink()
