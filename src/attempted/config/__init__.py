"""Config – environment-driven settings for the logging helpers."""
from attempted.config.settings import ENV_PREFIX, AttemptSettings, InvalidSettingValueError

__all__ = ["ENV_PREFIX", "AttemptSettings", "InvalidSettingValueError"]
