"""Internal helpers for environment-driven settings.

Centralizes how we read the ``WARNRESULT_*`` toggles so semantics remain
consistent across the codebase.
"""

from __future__ import annotations

import logging
import os

from warnresult.errors import HINTS, WarnResultError

__all__ = ["dev_validate_enabled", "warning_level"]

VALIDATE_ENV_VAR = "WARNRESULT_VALIDATE"
WARNING_LEVEL_ENV_VAR = "WARNRESULT_WARNING_LEVEL"


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Return True when dev-time outcome validation is enabled.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``WARNRESULT_VALIDATE`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(VALIDATE_ENV_VAR) == "1"


def warning_level(*, override: int | str | None = None) -> int:
    """Return the log level used when rendering warnings.

    Resolution order: ``override``, then ``WARNRESULT_WARNING_LEVEL``, then
    ``logging.WARNING``. Level names are case-insensitive.
    """
    raw: int | str | None = override
    if raw is None:
        raw = os.getenv(WARNING_LEVEL_ENV_VAR)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return logging.WARNING
    if isinstance(raw, int):
        return raw

    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise WarnResultError(
            f"Unknown warning level: {raw!r}", hint=HINTS["warning_level"]
        )
    return level
