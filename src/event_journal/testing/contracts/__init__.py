"""Testing contracts – shared conformance suite for journal adapters."""

from event_journal.testing.contracts.adapter import JournalAdapterContractTest

__all__ = ["JournalAdapterContractTest"]
