"""Error hierarchy — public re-export surface.

Hierarchy::

    AttemptError
    ├── ContractViolationError   (contract.py)
    ├── AttemptFailedError       (contract.py)
    └── InvalidSettingValueError (attempted.config.settings)
"""

from attempted.errors.base import AttemptError
from attempted.errors.contract import AttemptFailedError, ContractViolationError

__all__ = [
    "AttemptError",
    "AttemptFailedError",
    "ContractViolationError",
]
