"""MongoDB adapter: document journal storage.

Requires the ``document`` extra::

    pip install "event-journal[document]"
"""

from event_journal.adapters.mongodb.event_store import MongoJournalAdapter

__all__ = ["MongoJournalAdapter"]
