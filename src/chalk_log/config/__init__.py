"""Config – 12-factor settings and validation errors."""

from chalk_log.config.settings import (
    EnvSettingsLoader,
    LayoutSettings,
    OutputFormat,
    Settings,
    SettingsLoader,
)
from chalk_log.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LayoutSettings",
    "MissingRequiredSettingError",
    "OutputFormat",
    "Settings",
    "SettingsLoader",
]
