"""Application journal – Event."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any


@dataclasses.dataclass(frozen=True)
class Event:
    """An event as persisted in the journal.

    Instances are produced by adapters only; ``version`` and ``created_on``
    are assigned at persistence time.
    """

    ref: str
    """Identifies the entity/stream the event belongs to."""

    version: int
    """1-based sequence number, unique within ``ref``."""

    event: str
    """Event name (type), e.g. ``"OrderPlaced"``."""

    payload: Any = None
    """Scalar, list or plain dict; never a callable or a custom object."""

    initiated_by: str | None = None
    """Identifier of the actor that caused the event."""

    created_on: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    """Wall-clock time when the event was persisted."""

    id: Any = dataclasses.field(default=None, compare=False)
    """Backend surrogate key (``None`` for the in-memory adapter)."""

    def to_dict(self) -> dict[str, Any]:
        """Return the backend-independent record shape."""
        return {
            "ref": self.ref,
            "version": self.version,
            "event": self.event,
            "payload": self.payload,
            "initiated_by": self.initiated_by,
            "created_on": self.created_on,
        }


__all__ = ["Event"]
