"""Application – the journal use case (framework-agnostic)."""

from event_journal.application.journal import Event, Journal, JournalAdapter

__all__ = ["Event", "Journal", "JournalAdapter"]
