"""
event_journal – append-only event journal over interchangeable backends.

Import path convention::

    from event_journal import Journal
    from event_journal.kernel.errors import ConflictError
    from event_journal.adapters.sqlalchemy import SQLAlchemyJournalAdapter
"""

from event_journal.application.journal import Event, Journal, JournalAdapter
from event_journal.config import JournalSettings

__version__ = "0.1.0"
__all__ = ["Event", "Journal", "JournalAdapter", "JournalSettings", "__version__"]
