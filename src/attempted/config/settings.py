"""Config – AttemptSettings, read from ``ATTEMPTED_*`` environment variables."""
from __future__ import annotations

import dataclasses
import logging
import os
from typing import Mapping

from attempted.errors import AttemptError

ENV_PREFIX = "ATTEMPTED_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class InvalidSettingValueError(AttemptError):
    """A setting holds a value the logging helpers cannot use."""

    code = "invalid_setting"

    def __init__(self, variable: str, value: object, reason: str) -> None:
        super().__init__(f"{variable}={value!r} is invalid: {reason}")
        self.variable = variable
        self.value = value
        self.reason = reason


@dataclasses.dataclass
class AttemptSettings:
    """Settings for :func:`attempted.observability.configure_logging`.

    ``log_level`` is a stdlib level name (any case); ``log_json`` switches
    the console renderer for the JSON one.
    """

    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self) -> None:
        level = self.log_level.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError(
                f"{ENV_PREFIX}LOG_LEVEL", self.log_level, "not a logging level name"
            )
        self.log_level = level

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AttemptSettings:
        """Build settings from *environ* (``os.environ`` by default).

        Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        log_level = environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level is not None:
            kwargs["log_level"] = log_level

        log_json = environ.get(f"{ENV_PREFIX}LOG_JSON")
        if log_json is not None:
            kwargs["log_json"] = _parse_bool(f"{ENV_PREFIX}LOG_JSON", log_json)

        return cls(**kwargs)  # type: ignore[arg-type]


def _parse_bool(variable: str, raw: str) -> bool:
    token = raw.strip().lower()
    if token in _TRUE:
        return True
    if token in _FALSE:
        return False
    raise InvalidSettingValueError(
        variable, raw, f"expected one of {sorted(_TRUE | _FALSE)}"
    )


__all__ = ["ENV_PREFIX", "AttemptSettings", "InvalidSettingValueError"]
