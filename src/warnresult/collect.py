"""Fold a sequence of outcomes into one outcome over a built container."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
import logging

from warnresult.errors import HINTS, InvalidOutcomeError
from warnresult.outcome import Failure, Outcome, Success, invalid_outcome_reason

log = logging.getLogger(__name__)


@dataclass(slots=True)
class _Aggregation[W, E]:
    """Running state while a builder drains the success values."""

    warnings: list[W] = field(default_factory=list)
    failure: Failure[E] | None = None

    def successes[A](self, outcomes: Iterable[Outcome[A, W, E]]) -> Iterator[A]:
        for index, outcome in enumerate(outcomes):
            match outcome:
                case Success(value=value, warnings=warnings):
                    self.warnings.extend(warnings)
                    yield value
                case Failure():
                    log.debug("collect() stopped at failure in position %d", index)
                    self.failure = outcome
                    return
                case _:
                    raise InvalidOutcomeError(
                        f"collect() element {index}: {invalid_outcome_reason(outcome)}",
                        hint=HINTS["lift_result"],
                    )


def collect[A, W, E, C](
    outcomes: Iterable[Outcome[A, W, E]],
    builder: Callable[[Iterator[A]], C] = list,  # type: ignore[assignment]
) -> Outcome[C, W, E]:
    """Aggregate ``outcomes`` into a single outcome.

    Success values are fed, in order, to ``builder`` (``list``, ``tuple``,
    ``set``, ``"".join``, ...) and every warning sequence is concatenated in
    input order. The first ``Failure`` ends iteration: later elements are never
    pulled from ``outcomes``, and the warnings gathered so far are dropped.

    Args:
        outcomes: Any iterable of outcomes, consumed lazily.
        builder: Callable that builds a container from an iterator of values.

    Returns:
        ``Success(container, warnings)`` or the first ``Failure``.

    Example:
        >>> collect([Success(1, ["w1"]), Success(2), Success(3, ["w2"])])
        Success(value=[1, 2, 3], warnings=('w1', 'w2'))
    """
    state: _Aggregation[W, E] = _Aggregation()
    built = builder(state.successes(outcomes))
    if state.failure is not None:
        return state.failure
    return Success(built, tuple(state.warnings))

