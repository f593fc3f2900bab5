"""SQLAlchemy adapter – relational journal storage.

Requires the ``relational`` extra::

    pip install "event-journal[relational]"
"""
from event_journal.adapters.sqlalchemy.engine import build_engine, build_url
from event_journal.adapters.sqlalchemy.event_store import SQLAlchemyJournalAdapter
from event_journal.adapters.sqlalchemy.schema import events_table

__all__ = ["SQLAlchemyJournalAdapter", "build_engine", "build_url", "events_table"]
