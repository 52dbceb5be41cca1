"""Unit tests for observability logging helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from attempted import Attempt, AttemptFailedError
from attempted.config import AttemptSettings
from attempted.observability import configure_logging, get_logger, log_failure


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


# ---------------------------------------------------------------------------
# log_failure
# ---------------------------------------------------------------------------


class TestLogFailure:
    def test_logs_failure_payload(self) -> None:
        error = ValueError("boom")
        with capture_logs() as logs:
            Attempt.from_error(error).if_failure(log_failure())
        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "attempt.failed"
        assert entry["log_level"] == "warning"
        assert entry["error"] == "ValueError('boom')"
        assert entry["error_type"] == "ValueError"
        assert entry["exc_info"] is error

    def test_nothing_logged_on_success(self) -> None:
        with capture_logs() as logs:
            Attempt.from_value(1).if_failure(log_failure())
        assert logs == []

    def test_custom_event_level_and_fields(self) -> None:
        with capture_logs() as logs:
            Attempt.from_error("nope").if_else(
                lambda _: None,
                log_failure(event="config.load_failed", level="ERROR", path="/etc/app.toml"),
            )
        entry = logs[0]
        assert entry["event"] == "config.load_failed"
        assert entry["log_level"] == "error"
        assert entry["path"] == "/etc/app.toml"
        assert entry["error"] == "'nope'"
        assert "exc_info" not in entry

    def test_attempt_error_code_included(self) -> None:
        failed = Attempt.from_value(5).assert_(lambda v: v > 10, lambda v: f"{v} too small")
        with capture_logs() as logs:
            failed.if_failure(log_failure())
        assert logs[0]["error_code"] == AttemptFailedError.code

    def test_uses_given_logger(self) -> None:
        logger = get_logger("orders", order_id=42)
        with capture_logs() as logs:
            Attempt.from_error("x").if_failure(log_failure(logger))
        assert logs[0]["order_id"] == 42

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            log_failure(level="loud")


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    def test_sets_root_level_and_handler(self) -> None:
        configure_logging(AttemptSettings(log_level="DEBUG"))
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(AttemptSettings(log_json=True))
        get_logger("test").info("hello", answer=42)
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"answer": 42' in err

    def test_reads_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ATTEMPTED_LOG_LEVEL", "ERROR")
        configure_logging()
        assert logging.getLogger().level == logging.ERROR
