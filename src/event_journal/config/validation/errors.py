"""Errors raised while building or loading journal settings."""
from event_journal.kernel.errors import JournalError


class ConfigError(JournalError):
    """Settings could not be built from their source."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(
            f"Environment variable '{env_key}' is required",
            detail={"setting": env_key},
        )
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable (bad JSON, wrong type, blank name)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name} {reason}, got {value!r}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
