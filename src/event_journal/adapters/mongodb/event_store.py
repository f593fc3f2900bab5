"""MongoDB adapter: MongoJournalAdapter."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from event_journal.application.journal.adapter import JournalAdapter
from event_journal.application.journal.event import Event
from event_journal.kernel.errors import AdapterError, ConflictError, InvalidRefError
from event_journal.observability.logging import get_logger

logger = get_logger(__name__)


class MongoJournalAdapter(JournalAdapter):
    """Journal adapter backed by MongoDB through **motor**.

    Events are stored one document per event with a **unique compound
    index** on ``(ref, version)`` that acts as the optimistic-concurrency
    guard; a :class:`~pymongo.errors.DuplicateKeyError` on insert is
    reported as :class:`~event_journal.kernel.errors.ConflictError`.

    ``ref`` values must be 24-character hex ObjectId strings; they are
    stored as ``ObjectId`` and returned as strings.

    Connection options (merged over :attr:`default_options`):

    - ``uri``: full MongoDB URI, overrides ``hosts``.
    - ``hosts``, ``db_name``, ``collection_name``.
    - ``client_options``: keyword arguments for
      :class:`~motor.motor_asyncio.AsyncIOMotorClient`.
    - ``client``: an existing motor client to reuse (not closed on
      disconnect).
    - ``create_indexes``: create the journal indexes on connect.
    """

    name = "document"
    default_options: Mapping[str, Any] = {
        "hosts": "localhost:27018",
        "db_name": "event_source",
        "collection_name": "event_source",
        "client_options": {},
        "create_indexes": True,
    }

    def __init__(self) -> None:
        super().__init__()
        self._client: Any = None
        self._owns_client = False
        self._col: Any = None

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    async def connect(self, options: Mapping[str, Any] | None = None) -> MongoJournalAdapter:
        options = dict(options or {})
        client = options.pop("client", None)
        self.config = self.resolve_options(options)

        if client is None:
            import motor.motor_asyncio as motor_async

            uri = self.config.get("uri") or f"mongodb://{self.config['hosts']}/{self.config['db_name']}"
            client = motor_async.AsyncIOMotorClient(uri, **self.config["client_options"])
            self._owns_client = True

        col = client[self.config["db_name"]][self.config["collection_name"]]
        try:
            await client.admin.command("ping")
            if self.config.get("create_indexes", True):
                await self.create_indexes(col)
        except PyMongoError as exc:
            if self._owns_client:
                client.close()
            raise AdapterError(self.name, f"Could not connect: {exc}", cause=exc) from exc

        self._client = client
        self._col = col
        self.connected = True
        logger.info("adapter.connected", adapter=self.name, collection=self.config["collection_name"])
        return self

    async def disconnect(self) -> MongoJournalAdapter:
        client, self._client, self._col = self._client, None, None
        self.connected = False
        if client is not None and self._owns_client:
            client.close()
        logger.info("adapter.disconnected", adapter=self.name)
        return self

    @staticmethod
    async def create_indexes(collection: Any) -> None:
        """Create the journal indexes.

        Idempotent, safe to call repeatedly.
        """
        await collection.create_index(
            [("ref", 1), ("version", 1)],
            unique=True,
            name="idx_ref_version",
        )
        await collection.create_index([("ref", 1), ("event", 1)], name="idx_ref_event")
        await collection.create_index([("created_on", 1)], name="idx_created_on")

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
        col = self._connected_collection()
        oid = self._object_id(ref)
        if expected_version is None:
            expected_version = await self.latest_version(ref)

        doc = {
            "ref": oid,
            "version": expected_version + 1,
            "event": name,
            "payload": payload,
            "initiated_by": initiated_by,
            "created_on": datetime.now(UTC),
        }
        try:
            result = await col.insert_one(doc)
        except DuplicateKeyError as exc:
            actual = await self.latest_version(ref)
            logger.warning(
                "adapter.version_conflict",
                adapter=self.name,
                ref=ref,
                expected_version=expected_version,
                actual_version=actual,
            )
            raise ConflictError(ref, expected_version, actual, cause=exc) from exc
        except (PyMongoError, InvalidDocument) as exc:
            raise self._backend_error(exc, ref) from exc

        doc["_id"] = result.inserted_id
        return self._from_doc(doc)

    async def list_events(
        self,
        ref: str,
        from_version: int | None = None,
        to_version: int | None = None,
    ) -> list[Event]:
        col = self._connected_collection()
        query: dict[str, Any] = {"ref": self._object_id(ref)}
        bounds: dict[str, int] = {}
        if from_version is not None:
            bounds["$gte"] = from_version
        if to_version is not None:
            bounds["$lte"] = to_version
        if bounds:
            query["version"] = bounds
        try:
            cursor = col.find(query, sort=[("version", 1)])
            return [self._from_doc(doc) async for doc in cursor]
        except PyMongoError as exc:
            raise self._backend_error(exc, ref) from exc

    async def latest_version(self, ref: str) -> int:
        col = self._connected_collection()
        try:
            doc = await col.find_one(
                {"ref": self._object_id(ref)},
                projection={"version": 1},
                sort=[("version", -1)],
            )
        except PyMongoError as exc:
            raise self._backend_error(exc, ref) from exc
        return int(doc["version"]) if doc else 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _connected_collection(self) -> Any:
        self._require_connection()
        return self._col

    @staticmethod
    def _object_id(ref: str) -> ObjectId:
        if not isinstance(ref, str) or len(ref) != 24 or not ObjectId.is_valid(ref):
            raise InvalidRefError(ref, "must be a 24-character hex identifier")
        return ObjectId(ref)

    def _backend_error(self, exc: BaseException, ref: str) -> AdapterError:
        logger.error("adapter.backend_error", adapter=self.name, ref=ref, error=repr(exc))
        return AdapterError(self.name, f"{self.name} adapter error: {exc}", ref=ref, cause=exc)

    @staticmethod
    def _from_doc(doc: Mapping[str, Any]) -> Event:
        created_on = doc.get("created_on") or datetime.now(UTC)
        if created_on.tzinfo is None:
            created_on = created_on.replace(tzinfo=UTC)
        return Event(
            id=str(doc["_id"]) if doc.get("_id") is not None else None,
            ref=str(doc["ref"]),
            version=int(doc["version"]),
            event=doc["event"],
            payload=doc.get("payload"),
            initiated_by=doc.get("initiated_by"),
            created_on=created_on,
        )


__all__ = ["MongoJournalAdapter"]
