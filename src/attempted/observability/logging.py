"""Observability – structlog configuration and failure logging helpers.

The Attempt container never logs. Callers decide where failures go by
handing :func:`log_failure` to ``if_failure`` or ``if_else``::

    from attempted import Attempt, configure_logging, log_failure

    configure_logging()
    Attempt.of(load_config, path).if_failure(log_failure(event="config.load_failed", path=path))
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import structlog

from attempted.config import AttemptSettings
from attempted.errors import AttemptError

DEFAULT_LOGGER_NAME = "attempted"

_LEVELS = frozenset({"debug", "info", "warning", "error", "critical", "exception"})


def configure_logging(settings: AttemptSettings | None = None) -> None:
    """Configure structlog on top of the stdlib root logger.

    Reads :class:`AttemptSettings` from the environment when *settings* is
    not given. ``log_json`` selects the JSON renderer, otherwise the
    console renderer is used.
    """
    settings = settings or AttemptSettings.from_env()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: list[Any]
    if settings.log_json:
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=False)]
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderer],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def log_failure(
    logger: Any = None,
    *,
    event: str = "attempt.failed",
    level: str = "warning",
    **fields: Any,
) -> Callable[[Any], None]:
    """Build an ``if_failure`` callback that logs the failure payload.

    The event carries ``error`` (repr of the payload), ``error_type`` and,
    for exceptions, ``exc_info``. :class:`AttemptError` payloads also add
    ``error_code``. Extra *fields* are logged as is.
    """
    level = level.lower()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level {level!r}")

    def _log(error: Any) -> None:
        target = logger if logger is not None else get_logger(DEFAULT_LOGGER_NAME)
        kw: dict[str, Any] = {
            "error": repr(error),
            "error_type": type(error).__name__,
            **fields,
        }
        if isinstance(error, AttemptError):
            kw["error_code"] = error.code
        if isinstance(error, BaseException):
            kw["exc_info"] = error
        getattr(target, level)(event, **kw)

    return _log


__all__ = ["DEFAULT_LOGGER_NAME", "configure_logging", "get_logger", "log_failure"]
