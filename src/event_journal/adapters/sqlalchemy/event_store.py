"""SQLAlchemy adapter – SQLAlchemyJournalAdapter."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Table, func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from event_journal.adapters.sqlalchemy.engine import build_engine
from event_journal.adapters.sqlalchemy.schema import events_table
from event_journal.application.journal.adapter import JournalAdapter
from event_journal.application.journal.event import Event
from event_journal.kernel.errors import AdapterError, ConflictError
from event_journal.observability.logging import get_logger

logger = get_logger(__name__)

_UNIQUE_VIOLATION = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate:
        return str(sqlstate) == _UNIQUE_VIOLATION
    return "unique" in str(orig).lower()


class SQLAlchemyJournalAdapter(JournalAdapter):
    """Journal adapter for relational databases through SQLAlchemy asyncio.

    All events live in one table (``table_name``, default ``events``) with a
    surrogate primary key and ``UNIQUE (ref, version)``.  The database
    itself rejects a second writer for the same version; the resulting
    :class:`~sqlalchemy.exc.IntegrityError` becomes a
    :class:`~event_journal.kernel.errors.ConflictError`.

    Connection options (merged over :attr:`default_options`):

    - ``url``: full SQLAlchemy URL, overrides the individual parts.
    - ``drivername``, ``host``, ``port``, ``database``, ``username``,
      ``password``: URL parts.
    - ``pool_size``, ``echo``, ``engine_options``: engine tuning.
    - ``create_schema``: create the table on connect when missing.
    """

    name = "relational"
    default_options: Mapping[str, Any] = {
        "drivername": "postgresql+asyncpg",
        "host": "localhost",
        "port": 5432,
        "database": "event_source",
        "username": None,
        "password": None,
        "table_name": "events",
        "pool_size": 10,
        "echo": False,
        "engine_options": {},
        "create_schema": True,
    }

    def __init__(self) -> None:
        super().__init__()
        self._engine: AsyncEngine | None = None
        self._table: Table = events_table(str(self.default_options["table_name"]))

    @property
    def table(self) -> Table:
        return self._table

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    async def connect(self, options: Mapping[str, Any] | None = None) -> SQLAlchemyJournalAdapter:
        self.config = self.resolve_options(options)
        self._table = events_table(self.config["table_name"])
        engine = build_engine(self.config)
        try:
            async with engine.begin() as conn:
                if self.config.get("create_schema", True):
                    await conn.run_sync(self._table.metadata.create_all)
                else:
                    await conn.execute(select(1))
        except (SQLAlchemyError, OSError) as exc:
            await engine.dispose()
            raise AdapterError(self.name, f"Could not connect: {exc}", cause=exc) from exc

        self._engine = engine
        self.connected = True
        logger.info("adapter.connected", adapter=self.name, table=self._table.name)
        return self

    async def disconnect(self) -> SQLAlchemyJournalAdapter:
        engine, self._engine = self._engine, None
        self.connected = False
        if engine is not None:
            await engine.dispose()
        logger.info("adapter.disconnected", adapter=self.name)
        return self

    # ------------------------------------------------------------------
    # JournalAdapter interface
    # ------------------------------------------------------------------

    async def append_event(
        self,
        name: str,
        ref: str,
        payload: Any = None,
        initiated_by: str | None = None,
        expected_version: int | None = None,
    ) -> Event:
        engine = self._connected_engine()
        created_on = datetime.now(UTC)
        try:
            async with engine.begin() as conn:
                if expected_version is None:
                    expected_version = await self._latest_version(conn, ref)
                values = {
                    "ref": ref,
                    "version": expected_version + 1,
                    "event": name,
                    "initiated_by": initiated_by,
                    "created_on": created_on,
                    "payload": payload,
                }
                result = await conn.execute(insert(self._table).values(**values))
                primary_key = result.inserted_primary_key
        except IntegrityError as exc:
            if not _is_unique_violation(exc):
                raise self._backend_error(exc, ref) from exc
            actual = await self.latest_version(ref)
            logger.warning(
                "adapter.version_conflict",
                adapter=self.name,
                ref=ref,
                expected_version=expected_version,
                actual_version=actual,
            )
            raise ConflictError(ref, expected_version, actual, cause=exc) from exc
        except (SQLAlchemyError, OSError) as exc:
            raise self._backend_error(exc, ref) from exc

        return Event(
            id=primary_key[0] if primary_key else None,
            ref=ref,
            version=values["version"],
            event=name,
            payload=payload,
            initiated_by=initiated_by,
            created_on=created_on,
        )

    async def list_events(
        self,
        ref: str,
        from_version: int | None = None,
        to_version: int | None = None,
    ) -> list[Event]:
        engine = self._connected_engine()
        t = self._table
        stmt = select(t).where(t.c.ref == ref)
        if from_version is not None:
            stmt = stmt.where(t.c.version >= from_version)
        if to_version is not None:
            stmt = stmt.where(t.c.version <= to_version)
        stmt = stmt.order_by(t.c.version.asc())
        try:
            async with engine.connect() as conn:
                rows = (await conn.execute(stmt)).mappings().all()
        except (SQLAlchemyError, OSError) as exc:
            raise self._backend_error(exc, ref) from exc
        return [self._from_row(row) for row in rows]

    async def latest_version(self, ref: str) -> int:
        engine = self._connected_engine()
        try:
            async with engine.connect() as conn:
                return await self._latest_version(conn, ref)
        except (SQLAlchemyError, OSError) as exc:
            raise self._backend_error(exc, ref) from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _connected_engine(self) -> AsyncEngine:
        self._require_connection()
        assert self._engine is not None
        return self._engine

    async def _latest_version(self, conn: AsyncConnection, ref: str) -> int:
        t = self._table
        stmt = select(func.max(t.c.version)).where(t.c.ref == ref)
        return (await conn.execute(stmt)).scalar() or 0

    def _backend_error(self, exc: BaseException, ref: str) -> AdapterError:
        logger.error("adapter.backend_error", adapter=self.name, ref=ref, error=repr(exc))
        return AdapterError(self.name, f"{self.name} adapter error: {exc}", ref=ref, cause=exc)

    @staticmethod
    def _from_row(row: Mapping[str, Any]) -> Event:
        created_on = row["created_on"]
        if created_on is not None and created_on.tzinfo is None:
            created_on = created_on.replace(tzinfo=UTC)
        return Event(
            id=row["id"],
            ref=row["ref"],
            version=row["version"],
            event=row["event"],
            payload=row["payload"],
            initiated_by=row["initiated_by"],
            created_on=created_on,
        )


__all__ = ["SQLAlchemyJournalAdapter"]
