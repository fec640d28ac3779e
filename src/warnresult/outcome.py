"""Outcome: a result type that carries warnings.

Sometimes an operation can proceed despite running into problems, and the
caller still needs to know what those problems were. An ``Outcome`` is either
``Success(value, warnings)`` or ``Failure(error)``. A success with no warnings
is a clean success; a success with one or more warnings is a degraded success.
Both are the same variant, told apart only by ``len(warnings)``.

Every combinator returns a new value; nothing is mutated after construction.
Warnings keep their accumulation order, and merging two outcomes concatenates
left-then-right.

Escalating warnings to errors is always explicit and lossy: the
``*_treating_warnings_as_error`` family keeps only the first warning, because
a single error slot cannot carry more than one cause.

Example:
    >>> parsed = Success(42, ["trailing whitespace"])
    >>> parsed.map(str).discard_to_result()
    Ok(value='42')
    >>> parsed.to_result_treating_warnings_as_error()
    Err(error='trailing whitespace')
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from typing import Any

from warnresult._dev_flags import dev_validate_enabled
from warnresult.errors import HINTS, InvalidOutcomeError
from warnresult.result import Err, Ok, Result
from warnresult.sinks import WarningSink, resolve_sink


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T, W]:
    """A successful outcome with its accumulated warnings.

    ``warnings`` accepts any iterable and is stored as a tuple in the order
    given. Duplicates are kept.
    """

    value: T
    warnings: tuple[W, ...] = ()

    def __post_init__(self) -> None:
        if self.warnings is None or isinstance(self.warnings, str | bytes):
            raise InvalidOutcomeError(
                f"'warnings' must be a sequence of warnings, got {type(self.warnings).__name__}",
                hint=HINTS["wrap_warning"],
            )
        if not isinstance(self.warnings, tuple):
            object.__setattr__(self, "warnings", tuple(self.warnings))

    @classmethod
    def clean(cls, value: T) -> Success[T, W]:
        """Build a success with no warnings."""
        return cls(value, ())

    # --- Variant queries ---

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def is_degraded_or_failed(self) -> bool:
        """Return True when at least one warning is attached."""
        return len(self.warnings) > 0

    # --- Transformation ---

    def map[U](self, op: Callable[[T], U]) -> Success[U, W]:
        """Apply ``op`` to the value; warnings pass through untouched."""
        return Success(op(self.value), self.warnings)

    def map_error(self, op: Callable[[Any], Any]) -> Success[T, W]:  # noqa: ARG002
        return self

    def map_warnings[V](self, op: Callable[[W], V]) -> Success[T, V]:
        """Apply ``op`` to each warning in order, once per warning."""
        return Success(self.value, tuple(op(w) for w in self.warnings))

    # --- Chaining ---

    def and_[U, E](self, other: Outcome[U, W, E]) -> Outcome[U, W, E]:
        """Return ``other`` with this outcome's warnings prepended to its own.

        If ``other`` is a failure it is returned as is and this outcome's
        warnings are dropped.
        """
        match _checked(other, source="and_()"):
            case Success(value=value, warnings=warnings):
                return Success(value, self.warnings + warnings)
            case failure:
                return failure

    def and_then[U, V, E](
        self, op: Callable[[T, tuple[W, ...]], Outcome[U, V, E]]
    ) -> Outcome[U, V, E]:
        """Hand the value and warnings to ``op`` and return what it builds.

        ``op`` owns the warnings from here on: anything it does not fold into
        its return value is gone.
        """
        return _checked(op(self.value, self.warnings), source="and_then() callback")

    def or_[E](self, fallback: Outcome[T, W, E]) -> Success[T, W]:
        _checked(fallback, source="or_()")
        return self

    def or_else(self, op: Callable[[Any], Any]) -> Success[T, W]:  # noqa: ARG002
        return self

    # --- Collapse to a binary result ---

    def discard_to_result(self) -> Ok[T]:
        """Return ``Ok(value)``, silently dropping every warning."""
        return Ok(self.value)

    def to_result_treating_warnings_as_error(self) -> Result[T, W]:
        """Return ``Err(first warning)`` when degraded, else ``Ok(value)``.

        Only the first warning survives. Any later warnings are discarded.
        """
        if self.warnings:
            return Err(self.warnings[0])
        return Ok(self.value)

    def to_result_treating_warnings_as_nested_error(self) -> Result[T, Result[W, Any]]:
        """Return ``Err(Ok(first warning))`` when degraded, else ``Ok(value)``."""
        if self.warnings:
            return Err(Ok(self.warnings[0]))
        return Ok(self.value)

    # --- Unwrap ---

    def unwrap_discard_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_after_treating_warnings_as_error(self, default: T) -> T:
        """Return the value only when warnings are present, else ``default``.

        Note the inversion: a clean success yields ``default`` and a degraded
        success yields the real value.
        """
        if self.warnings:
            return self.value
        return default

    def unwrap_discard_or_else(self, op: Callable[[Any], T]) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else_after_treating_warnings_as_error(self, op: Callable[[W], T]) -> T:
        """Return the value when clean, else ``op(first warning)``."""
        if self.warnings:
            return op(self.warnings[0])
        return self.value

    # --- Optional projections ---

    def take_success_discarding_warnings(self) -> T:
        return self.value

    def take_error(self) -> None:
        return None

    def take_success_if_clean(self) -> T | None:
        """Return the value on a clean success, None when any warning is attached."""
        return None if self.warnings else self.value

    def take_error_treating_warnings_as_error(self) -> W | None:
        """Return the first warning, if any."""
        return self.warnings[0] if self.warnings else None

    # --- Rendering collapse ---

    def _render_warnings(self, sink: WarningSink | None) -> None:
        target = resolve_sink(sink)
        for w in self.warnings:
            target.emit(w)

    def unwrap_logging_warnings_or(
        self, default: T, *, sink: WarningSink | None = None  # noqa: ARG002
    ) -> T:
        """Render every warning to ``sink`` in order, then return the value."""
        self._render_warnings(sink)
        return self.value

    def unwrap_logging_warnings_or_else(
        self, op: Callable[[Any], T], *, sink: WarningSink | None = None  # noqa: ARG002
    ) -> T:
        self._render_warnings(sink)
        return self.value

    def to_result_logging_warnings(self, *, sink: WarningSink | None = None) -> Ok[T]:
        self._render_warnings(sink)
        return Ok(self.value)

    def take_success_logging_warnings(self, *, sink: WarningSink | None = None) -> T:
        self._render_warnings(sink)
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """A failed outcome, containing the error."""

    error: E

    # --- Variant queries ---

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def is_degraded_or_failed(self) -> bool:
        return True

    # --- Transformation ---

    def map(self, op: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        return self

    def map_error[F](self, op: Callable[[E], F]) -> Failure[F]:
        """Apply ``op`` to the error payload."""
        return Failure(op(self.error))

    def map_warnings(self, op: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        return self

    # --- Chaining ---

    def and_(self, other: Outcome[Any, Any, E]) -> Failure[E]:
        _checked(other, source="and_()")
        return self

    def and_then(self, op: Callable[..., Any]) -> Failure[E]:  # noqa: ARG002
        return self

    def or_[T, W, F](self, fallback: Outcome[T, W, F]) -> Outcome[T, W, F]:
        """Return ``fallback`` in place of this failure."""
        return _checked(fallback, source="or_()")

    def or_else[T, W, F](self, op: Callable[[E], Outcome[T, W, F]]) -> Outcome[T, W, F]:
        """Return the outcome ``op`` builds from the error payload."""
        return _checked(op(self.error), source="or_else() callback")

    # --- Collapse to a binary result ---

    def discard_to_result(self) -> Err[E]:
        return Err(self.error)

    def to_result_treating_warnings_as_error(self) -> Err[E]:
        return Err(self.error)

    def to_result_treating_warnings_as_nested_error(self) -> Err[Err[E]]:
        return Err(Err(self.error))

    # --- Unwrap ---

    def unwrap_discard_or[T](self, default: T) -> T:
        return default

    def unwrap_or_after_treating_warnings_as_error[T](self, default: T) -> T:
        return default

    def unwrap_discard_or_else[T](self, op: Callable[[E], T]) -> T:
        return op(self.error)

    def unwrap_or_else_after_treating_warnings_as_error[T](self, op: Callable[[E], T]) -> T:
        return op(self.error)

    # --- Optional projections ---

    def take_success_discarding_warnings(self) -> None:
        return None

    def take_error(self) -> E:
        return self.error

    def take_success_if_clean(self) -> None:
        return None

    def take_error_treating_warnings_as_error(self) -> E:
        return self.error

    # --- Rendering collapse (nothing is rendered on failure) ---

    def unwrap_logging_warnings_or[T](
        self, default: T, *, sink: WarningSink | None = None  # noqa: ARG002
    ) -> T:
        return default

    def unwrap_logging_warnings_or_else[T](
        self, op: Callable[[E], T], *, sink: WarningSink | None = None  # noqa: ARG002
    ) -> T:
        return op(self.error)

    def to_result_logging_warnings(
        self, *, sink: WarningSink | None = None  # noqa: ARG002
    ) -> Err[E]:
        return Err(self.error)

    def take_success_logging_warnings(
        self, *, sink: WarningSink | None = None  # noqa: ARG002
    ) -> None:
        return None


type Outcome[T, W, E] = Success[T, W] | Failure[E]


def from_result[T, E](result: Result[T, E]) -> Outcome[T, Any, E]:
    """Lift a binary result: ``Ok(t)`` becomes a clean success, ``Err(e)`` a failure."""
    match result:
        case Ok(value=value):
            return Success(value, ())
        case Err(error=error):
            return Failure(error)
        case _:
            raise InvalidOutcomeError(
                f"from_result() expects Ok or Err, got {type(result).__name__}"
            )


def invalid_outcome_reason(obj: object) -> str | None:
    """Internal: return None when ``obj`` is a well-formed outcome, else a reason.

    Shared by the public guards in ``warnresult.validation`` and the dev-time
    checks below.
    """
    if isinstance(obj, Failure):
        return None
    if isinstance(obj, Success):
        # Only reachable when __post_init__ was bypassed via object.__setattr__.
        if not isinstance(obj.warnings, tuple):
            return f"'warnings' must be tuple, got {type(obj.warnings).__name__}"
        return None
    if isinstance(obj, Ok | Err):
        return f"got binary result {type(obj).__name__}; lift it with from_result()"
    return f"Outcome must be Success or Failure, got {type(obj).__name__}"


def _checked[O](obj: O, *, source: str) -> O:
    if not dev_validate_enabled():
        return obj
    reason = invalid_outcome_reason(obj)
    if reason is not None:
        hint = HINTS["lift_result"] if isinstance(obj, Ok | Err) else HINTS["callback_outcome"]
        raise InvalidOutcomeError(f"{source}: {reason}", hint=hint)
    return obj
