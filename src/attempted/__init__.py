"""
attempted – turn raising calls into success/failure values.

Import path convention::

    from attempted import Attempt
    from attempted.errors import ContractViolationError
    from attempted.config import AttemptSettings
    from attempted.observability import configure_logging, log_failure
"""

from attempted.attempt import Attempt
from attempted.config import AttemptSettings, InvalidSettingValueError
from attempted.errors import AttemptError, AttemptFailedError, ContractViolationError
from attempted.observability import configure_logging, get_logger, log_failure

__version__ = "0.1.0"
__all__ = [
    "Attempt",
    "AttemptError",
    "AttemptFailedError",
    "AttemptSettings",
    "ContractViolationError",
    "InvalidSettingValueError",
    "__version__",
    "configure_logging",
    "get_logger",
    "log_failure",
]
