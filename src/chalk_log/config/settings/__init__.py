"""Config settings – 12-factor env-based configuration."""
from chalk_log.config.settings.base import Settings
from chalk_log.config.settings.layout import LayoutSettings, OutputFormat
from chalk_log.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LayoutSettings", "OutputFormat", "Settings", "SettingsLoader"]
