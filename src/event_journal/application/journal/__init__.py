"""Application: event journal facade, adapter port and registry."""

from event_journal.application.journal.adapter import JournalAdapter, merge_options
from event_journal.application.journal.event import Event
from event_journal.application.journal.journal import Journal
from event_journal.application.journal.memory import InMemoryJournalAdapter
from event_journal.application.journal.registry import (
    SUPPORTED_ADAPTERS,
    create_adapter,
    resolve_adapter_name,
)

__all__ = [
    "Event",
    "InMemoryJournalAdapter",
    "Journal",
    "JournalAdapter",
    "SUPPORTED_ADAPTERS",
    "create_adapter",
    "merge_options",
    "resolve_adapter_name",
]
