"""Pytest configuration and fixtures.

Provides environment isolation, a recording sink test double, and shared
helpers. Autouse fixtures opt out via markers noted in their docstrings.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingSink:
    """Warning sink test double.

    Captures every emitted warning in order, plus its rendered text, so tests
    can check both the count and the order of sink writes.
    """

    emitted: list[Any] = field(default_factory=list)

    def emit(self, warning: Any) -> None:
        self.emitted.append(warning)

    @property
    def rendered(self) -> list[str]:
        return [str(w) for w in self.emitted]


@dataclass
class CallCounter:
    """Callable wrapper that records each argument it receives."""

    op: Callable[..., Any]
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.op(*args)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def counter() -> Callable[[Callable[..., Any]], CallCounter]:
    """Factory fixture: ``counter(op)`` returns a recording wrapper around ``op``."""
    return CallCounter


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_warnresult_env(request, monkeypatch):
    """Clear WARNRESULT_* env vars so host settings never leak into tests.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("WARNRESULT_"):
            monkeypatch.delenv(key, raising=False)
