"""Root of the exceptions raised by attempted itself."""

from __future__ import annotations


class AttemptError(Exception):
    """Something the library, not the wrapped callable, complained about.

    ``code`` is a stable slug; :func:`attempted.observability.log_failure`
    logs it as ``error_code``.
    """

    code: str = "attempt_error"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause


__all__ = ["AttemptError"]
