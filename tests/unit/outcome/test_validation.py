"""Unit tests for outcome guards and dev-time validation."""

import pytest

from warnresult import (
    Err,
    Failure,
    InvalidOutcomeError,
    Ok,
    Success,
    ensure_outcome,
    explain_invalid_outcome,
    is_outcome,
)

pytestmark = pytest.mark.unit


class TestGuards:
    @pytest.mark.parametrize("obj", [Success(1), Success(1, ["w"]), Failure("e")])
    def test_valid_outcomes(self, obj):
        assert is_outcome(obj)
        assert explain_invalid_outcome(obj) is None
        assert ensure_outcome(obj) is obj

    @pytest.mark.parametrize("obj", [None, 1, "text", (1, []), {"value": 1}])
    def test_foreign_values(self, obj):
        assert not is_outcome(obj)
        reason = explain_invalid_outcome(obj)
        assert reason == f"Outcome must be Success or Failure, got {type(obj).__name__}"

    @pytest.mark.parametrize("obj", [Ok(1), Err("e")])
    def test_binary_results_point_to_lifting(self, obj):
        assert not is_outcome(obj)
        assert "from_result()" in explain_invalid_outcome(obj)
        with pytest.raises(InvalidOutcomeError) as exc:
            ensure_outcome(obj)
        assert exc.value.hint is not None

    def test_tampered_warnings_are_reported(self):
        outcome = Success(1)
        object.__setattr__(outcome, "warnings", ["w"])
        assert explain_invalid_outcome(outcome) == "'warnings' must be tuple, got list"


class TestDevValidation:
    def test_disabled_by_default_passes_values_through(self):
        assert Failure("e").or_(Ok(1)) == Ok(1)  # type: ignore[arg-type]

    def test_and_then_callback_checked(self, monkeypatch):
        monkeypatch.setenv("WARNRESULT_VALIDATE", "1")
        with pytest.raises(InvalidOutcomeError) as exc:
            Success(1).and_then(lambda v, _ws: v)
        assert str(exc.value).startswith("and_then() callback: Outcome must be")

    def test_or_else_callback_checked(self, monkeypatch):
        monkeypatch.setenv("WARNRESULT_VALIDATE", "1")
        with pytest.raises(InvalidOutcomeError) as exc:
            Failure("e").or_else(lambda e: Ok(e))
        assert "from_result()" in str(exc.value)

    @pytest.mark.parametrize("receiver", [Success(1), Failure("e")])
    def test_and_argument_checked_on_both_variants(self, monkeypatch, receiver):
        monkeypatch.setenv("WARNRESULT_VALIDATE", "1")
        with pytest.raises(InvalidOutcomeError):
            receiver.and_("not an outcome")

    @pytest.mark.parametrize("receiver", [Success(1), Failure("e")])
    def test_or_argument_checked_on_both_variants(self, monkeypatch, receiver):
        monkeypatch.setenv("WARNRESULT_VALIDATE", "1")
        with pytest.raises(InvalidOutcomeError):
            receiver.or_(Err("e"))

    def test_valid_values_pass_when_enabled(self, monkeypatch):
        monkeypatch.setenv("WARNRESULT_VALIDATE", "1")
        assert Success(1, ["a"]).and_(Success(2, ["b"])) == Success(2, ["a", "b"])
        assert Failure("e").or_else(lambda e: Success(e)) == Success("e")
