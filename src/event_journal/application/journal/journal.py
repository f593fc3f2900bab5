"""Application journal – Journal facade."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from event_journal.application.journal.adapter import JournalAdapter
from event_journal.application.journal.event import Event
from event_journal.application.journal.registry import create_adapter, resolve_adapter_name
from event_journal.application.journal.validation import (
    check_event_name,
    check_expected_version,
    check_payload,
    check_range,
    check_ref,
)
from event_journal.config.settings import JournalSettings
from event_journal.kernel.errors import (
    AlreadyInitializedError,
    ClientInitializationError,
    NotInitializedError,
)
from event_journal.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass
class _JournalState:
    config: JournalSettings
    adapter: JournalAdapter | None = None
    adapter_name: str | None = None


class Journal:
    """Backend-agnostic entry point for appending and reading events.

    A journal holds at most one connected adapter.  It validates every
    argument before delegating, so invalid input never reaches a backend.
    Version numbers are assigned by the adapter, atomically with the write.

    Example::

        journal = Journal(adapter_name="memory")
        await journal.create_client()
        await journal.append_event("OrderPlaced", "order-1", {"total": 10})
        events = await journal.list_events("order-1")
        await journal.destroy_client()

    or, equivalently, ``async with Journal(adapter_name="memory") as journal``.

    ``create_client`` and ``destroy_client`` must not run concurrently on the
    same instance.
    """

    def __init__(
        self,
        settings: JournalSettings | None = None,
        *,
        adapter_name: str | None = None,
        db_connection_options: Mapping[str, Any] | None = None,
    ) -> None:
        settings = settings or JournalSettings()
        overrides: dict[str, Any] = {}
        if adapter_name is not None:
            overrides["adapter_name"] = adapter_name
        if db_connection_options is not None:
            overrides["db_connection_options"] = db_connection_options
        self._state = _JournalState(config=dataclasses.replace(settings, **overrides))

    @property
    def config(self) -> JournalSettings:
        """A copy of the configuration the journal was built with."""
        return dataclasses.replace(self._state.config)

    @property
    def initialized(self) -> bool:
        return self._state.adapter is not None

    @property
    def adapter_name(self) -> str | None:
        """Canonical name of the connected adapter, ``None`` when uninitialized."""
        return self._state.adapter_name

    async def __aenter__(self) -> Journal:
        return await self.create_client()

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.destroy_client()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def create_client(
        self,
        adapter_name: str | None = None,
        connection_options: Mapping[str, Any] | None = None,
    ) -> Journal:
        """Instantiate the selected adapter and connect it to its backend.

        Raises
        ------
        InvalidAdapterError
            The name is not one of the supported adapters.
        AlreadyInitializedError
            A client is already connected; it is left untouched.
        ClientInitializationError
            The adapter could not be built (a missing backend extra) or failed
            to connect; the original error is chained.
        """
        config = self._state.config
        name = resolve_adapter_name(adapter_name or config.adapter_name)
        if self._state.adapter is not None:
            raise AlreadyInitializedError(self._state.adapter_name)

        options = connection_options if connection_options is not None else config.db_connection_options
        try:
            adapter = create_adapter(name)
            connected = await adapter.connect(options)
        except Exception as exc:
            logger.error("journal.client_init_failed", adapter=name, error=repr(exc))
            raise ClientInitializationError(name, exc) from exc

        self._state.adapter = connected
        self._state.adapter_name = name
        logger.info("journal.client_created", adapter=name)
        return self

    async def destroy_client(self) -> Journal:
        """Disconnect and discard the adapter; a no-op when uninitialized.

        The journal is marked uninitialized before ``disconnect`` runs, so a
        failing disconnect still leaves it uninitialized.
        """
        adapter, name = self._state.adapter, self._state.adapter_name
        if adapter is None:
            return self

        self._state.adapter = None
        self._state.adapter_name = None
        await adapter.disconnect()
        logger.info("journal.client_destroyed", adapter=name)
        return self

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _adapter(self) -> JournalAdapter:
        if self._state.adapter is None:
            raise NotInitializedError()
        return self._state.adapter

    async def append_event(
        self,
        name: str,
        ref: str,
        payload: Any = None,
        initiated_by: str | None = None,
        expected_version: int | None = None,
    ) -> Event:
        """Append a new event for *ref* and return it as persisted.

        When *expected_version* is omitted the adapter appends after the
        latest stored version.  A concurrent writer that already took
        ``expected_version + 1`` makes this raise
        :class:`~event_journal.kernel.errors.ConflictError`.
        """
        adapter = self._adapter()
        check_event_name(name)
        check_ref(ref)
        expected_version = check_expected_version(expected_version)
        payload = check_payload(payload)
        return await adapter.append_event(name, ref, payload, initiated_by, expected_version)

    async def list_events(
        self,
        ref: str,
        from_version: int | None = None,
        to_version: int | None = None,
    ) -> list[Event]:
        """Return events for *ref* with ``from_version <= version <= to_version``."""
        adapter = self._adapter()
        check_ref(ref)
        check_range(from_version, to_version)
        return await adapter.list_events(ref, from_version, to_version)

    async def latest_version(self, ref: str) -> int:
        """Return the highest stored version for *ref*, or ``0``."""
        adapter = self._adapter()
        check_ref(ref)
        return await adapter.latest_version(ref)


__all__ = ["Journal"]
