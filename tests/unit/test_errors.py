"""Unit tests for the error hierarchy."""

from __future__ import annotations

import pytest

from attempted.config import InvalidSettingValueError
from attempted.errors import AttemptError, AttemptFailedError, ContractViolationError


class TestAttemptError:
    def test_message_and_code(self) -> None:
        err = AttemptError("something broke")
        assert err.message == "something broke"
        assert str(err) == "something broke"
        assert err.code == "attempt_error"
        assert err.__cause__ is None

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = AttemptError("outer", cause=cause)
        assert err.__cause__ is cause


class TestContractViolationError:
    def test_carries_operation(self) -> None:
        err = ContractViolationError("bad", operation="get")
        assert isinstance(err, AttemptError)
        assert err.code == "contract_violation"
        assert err.operation == "get"

    def test_operation_is_required(self) -> None:
        with pytest.raises(TypeError):
            ContractViolationError("bad")  # type: ignore[call-arg]


class TestAttemptFailedError:
    def test_code(self) -> None:
        err = AttemptFailedError("wrapped: x")
        assert err.code == "attempt_failed"
        assert str(err) == "wrapped: x"

    def test_catchable_as_attempt_error(self) -> None:
        with pytest.raises(AttemptError):
            raise AttemptFailedError("x")


class TestInvalidSettingValueError:
    def test_fields_and_message(self) -> None:
        err = InvalidSettingValueError("ATTEMPTED_LOG_LEVEL", "LOUD", "not a logging level name")
        assert isinstance(err, AttemptError)
        assert err.code == "invalid_setting"
        assert err.variable == "ATTEMPTED_LOG_LEVEL"
        assert err.value == "LOUD"
        assert err.reason == "not a logging level name"
        assert str(err) == "ATTEMPTED_LOG_LEVEL='LOUD' is invalid: not a logging level name"
