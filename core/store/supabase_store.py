# =============================================================================
# core/store/supabase_store.py - Document Database Record Store
# =============================================================================
# Stores each collection as a Supabase (PostgREST) table:
#
#   create table founders (
#     id uuid primary key,
#     created_at timestamptz not null default now(),
#     payload jsonb not null default '{}'
#   );
#
# `payload` holds everything except id/createdAt, so rows map back to the
# same flat record shape the file store returns.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from app.exceptions import StorageWriteError
from core.models.records import EntityKind, Record
from core.store.base import ReadResult, RecordStore
from lib.supabase_client import SupabaseClient
from lib.utils import parse_iso, to_iso

logger = logging.getLogger(__name__)


def record_to_row(record: Record) -> dict[str, Any]:
    """Split a flat record into table columns."""
    payload = {k: v for k, v in record.items() if k not in ("id", "createdAt")}
    return {
        "id": record["id"],
        "created_at": record["createdAt"],
        "payload": payload,
    }


def row_to_record(row: dict[str, Any]) -> Record:
    """Rebuild a flat record from a table row."""
    created_at = row.get("created_at")
    if isinstance(created_at, str):
        created_at = to_iso(parse_iso(created_at))

    record: Record = {"id": row["id"], "createdAt": created_at}
    record.update(row.get("payload") or {})
    return record


class SupabaseRecordStore(RecordStore):
    """
    Record store backed by one Supabase table per collection.

    Args:
        client: Supabase client to use; defaults to the shared singleton
    """

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = SupabaseClient.get_client()
        return self._client

    def list(self, collection: str) -> ReadResult:
        try:
            response = (
                self.client.table(collection)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list {collection}: {e}")
            return ReadResult.failed(str(e))

        rows = response.data or []
        logger.debug(f"Fetched {len(rows)} rows from {collection}")
        return ReadResult(records=[row_to_record(row) for row in rows])

    def append(self, collection: str, record: Record) -> Record:
        try:
            response = (
                self.client.table(collection)
                .insert(record_to_row(record))
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to insert into {collection}: {e}")
            raise StorageWriteError(collection, str(e))

        if not response.data:
            raise StorageWriteError(collection, "Insert returned no data")

        return row_to_record(response.data[0])

    def remove_by_id(self, collection: str, record_id: str) -> int:
        try:
            UUID(record_id)
        except ValueError:
            # Postgres would reject it as a uuid; nothing can match
            return 0

        try:
            response = (
                self.client.table(collection)
                .delete()
                .eq("id", record_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to delete {record_id} from {collection}: {e}")
            raise StorageWriteError(collection, str(e))

        return len(response.data or [])

    def check(self) -> None:
        for kind in EntityKind:
            self.client.table(kind.value).select("id").limit(1).execute()
