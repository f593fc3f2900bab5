"""Config settings – Settings base class and JournalSettings."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar

from event_journal.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class JournalSettings(Settings):
    """Configuration a :class:`~event_journal.Journal` is constructed with.

    ``adapter_name`` is checked against the adapter registry only when the
    client is created, so an unknown name surfaces as
    :class:`~event_journal.kernel.errors.InvalidAdapterError` there.

    Environment variables: ``JOURNAL_ADAPTER_NAME`` and
    ``JOURNAL_DB_CONNECTION_OPTIONS`` (a JSON object).
    """

    _prefix: ClassVar[str] = "JOURNAL"

    adapter_name: str = "memory"
    db_connection_options: dict[str, Any] = dataclasses.field(default_factory=dict)

    def _validate(self) -> None:
        if not isinstance(self.adapter_name, str) or not self.adapter_name.strip():
            raise InvalidSettingValueError("adapter_name", self.adapter_name, "must be a non-empty string")
        if self.db_connection_options is None:
            self.db_connection_options = {}
        elif not isinstance(self.db_connection_options, Mapping):
            raise InvalidSettingValueError(
                "db_connection_options", self.db_connection_options, "must be a mapping"
            )
        else:
            self.db_connection_options = dict(self.db_connection_options)


__all__ = ["JournalSettings", "Settings"]
