"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── FormattingError                  (formatting.py)
    │   └── InvalidLeftoverArgumentsError
    └── ConfigError                      (chalk_log.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from chalk_log.kernel.errors.base import BaseError
from chalk_log.kernel.errors.formatting import FormattingError, InvalidLeftoverArgumentsError

__all__ = [
    "BaseError",
    "FormattingError",
    "InvalidLeftoverArgumentsError",
]
