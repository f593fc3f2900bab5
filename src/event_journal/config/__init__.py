"""Config – journal settings and their loaders."""

from event_journal.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    JournalSettings,
    Settings,
    SettingsLoader,
)
from event_journal.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "JournalSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
