"""Errors raised by the Attempt container itself."""

from __future__ import annotations

from attempted.errors.base import AttemptError


class ContractViolationError(AttemptError):
    """The caller used an Attempt the wrong way round.

    Reading the value of a failure, the error of a success, or feeding a
    failed attempt to ``from_value`` are programming errors: they are raised
    immediately and never captured into another Attempt. ``operation`` names
    the Attempt method that was misused.
    """

    code = "contract_violation"

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.operation = operation


class AttemptFailedError(AttemptError):
    """Failure described by a plain message.

    ``or_throw`` raises it and ``assert_`` stores it when the caller passes
    (or a factory returns) a string instead of an exception.
    """

    code = "attempt_failed"


__all__ = ["AttemptFailedError", "ContractViolationError"]
