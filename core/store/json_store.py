# =============================================================================
# core/store/json_store.py - File-Backed Record Store
# =============================================================================
# Each collection is a single JSON array on disk: <data_dir>/<collection>.json
#
# Every operation loads the whole file, changes the list in memory and
# writes the whole file back. A per-collection lock serialises those
# read-modify-write cycles inside one process, so concurrent creates don't
# overwrite each other. Separate processes sharing a data dir are not
# coordinated (last writer wins).
#
# Usage:
#   store = JsonFileStore("data")
#   store.append("founders", {"id": "...", "name": "Asha", ...})
#   result = store.list("founders")
#   if result.ok: ...
# =============================================================================

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from app.exceptions import StorageReadError, StorageWriteError
from core.models.records import Record
from core.store.base import ReadResult, RecordStore

logger = logging.getLogger(__name__)


class JsonFileStore(RecordStore):
    """
    Record store keeping one JSON array file per collection.

    Files are created as "[]" the first time a collection is touched.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _lock_for(self, collection: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = self._locks[collection] = threading.Lock()
            return lock

    def _read(self, collection: str) -> ReadResult:
        """Load a collection. Caller holds the collection lock."""
        path = self.path_for(collection)

        try:
            if not path.exists():
                self._write(collection, [])

            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)

        except (OSError, ValueError, StorageWriteError) as e:
            logger.error(f"Failed to read {path}: {e}")
            return ReadResult.failed(str(e))

        if not isinstance(data, list):
            logger.error(f"Expected a JSON array in {path}, got {type(data).__name__}")
            return ReadResult.failed(f"{path.name} does not contain a JSON array")

        return ReadResult(records=data)

    def _write(self, collection: str, records: list[Record]) -> None:
        """
        Replace the collection file. Caller holds the collection lock.

        Writes a sibling temp file and renames it over the target so a
        failed write never leaves a truncated collection behind.
        """
        path = self.path_for(collection)
        tmp_name = None

        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.data_dir, prefix=f".{collection}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)

        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write {path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(collection, str(e))

    # -------------------------------------------------------------------------
    # RecordStore
    # -------------------------------------------------------------------------

    def list(self, collection: str) -> ReadResult:
        with self._lock_for(collection):
            return self._read(collection)

    def append(self, collection: str, record: Record) -> Record:
        with self._lock_for(collection):
            current = self._read(collection)
            if not current.ok:
                # Rewriting now would replace the unreadable file with one record
                raise StorageReadError(collection, current.error)

            current.records.append(record)
            self._write(collection, current.records)

        logger.debug(f"Appended record {record.get('id')} to {collection}")
        return record

    def remove_by_id(self, collection: str, record_id: str) -> int:
        with self._lock_for(collection):
            current = self._read(collection)
            if not current.ok:
                raise StorageReadError(collection, current.error)

            kept = [
                r for r in current.records
                if not (isinstance(r, dict) and r.get("id") == record_id)
            ]
            removed = len(current.records) - len(kept)
            self._write(collection, kept)

        return removed

    def check(self) -> None:
        if not self.data_dir.is_dir():
            raise StorageReadError("*", f"data directory missing: {self.data_dir}")
        if not os.access(self.data_dir, os.W_OK):
            raise StorageWriteError("*", f"data directory not writable: {self.data_dir}")
