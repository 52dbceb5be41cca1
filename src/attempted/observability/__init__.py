"""Observability – structured logging helpers."""
from attempted.observability.logging import (
    DEFAULT_LOGGER_NAME,
    configure_logging,
    get_logger,
    log_failure,
)

__all__ = ["DEFAULT_LOGGER_NAME", "configure_logging", "get_logger", "log_failure"]
