"""Config settings – 12-factor env-based configuration."""
from event_journal.config.settings.base import JournalSettings, Settings
from event_journal.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "JournalSettings", "Settings", "SettingsLoader"]
