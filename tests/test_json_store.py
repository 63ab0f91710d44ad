# =============================================================================
# tests/test_json_store.py - File-Backed Record Store Tests
# =============================================================================
# Tests for JsonFileStore:
# - files are created as empty arrays on first access
# - append/remove rewrite the whole collection
# - unreadable collections are reported, never overwritten
# - write failures raise instead of being swallowed
# - concurrent appends to one collection don't lose records
# =============================================================================

import json
import threading

import pytest

from app.exceptions import StorageReadError, StorageWriteError
from core.store import json_store
from core.store.json_store import JsonFileStore


def make_record(record_id: str, name: str = "A") -> dict:
    return {"id": record_id, "createdAt": "2024-01-15T10:30:00.000Z", "name": name, "email": "a@b.com"}


# =============================================================================
# Basic Operations
# =============================================================================

class TestJsonFileStoreBasics:
    """list / append / remove_by_id on a healthy data directory."""

    def test_creates_data_dir(self, tmp_path):
        JsonFileStore(tmp_path / "nested" / "data")

        assert (tmp_path / "nested" / "data").is_dir()

    def test_missing_file_initialised_empty(self, store):
        result = store.list("founders")

        assert result.ok
        assert result.records == []
        assert json.loads(store.path_for("founders").read_text()) == []

    def test_append_then_list(self, store):
        store.append("founders", make_record("1"))
        store.append("founders", make_record("2"))

        result = store.list("founders")
        assert [r["id"] for r in result.records] == ["1", "2"]

    def test_append_returns_record(self, store):
        record = make_record("1")

        assert store.append("mentors", record) == record

    def test_file_is_pretty_printed_array(self, store):
        store.append("investors", make_record("1", name="Zoë"))

        text = store.path_for("investors").read_text(encoding="utf-8")
        assert text.startswith("[\n  {")
        assert "Zoë" in text

    def test_collections_are_separate_files(self, store):
        store.append("founders", make_record("f1"))
        store.append("mentors", make_record("m1"))

        assert [r["id"] for r in store.list("founders").records] == ["f1"]
        assert [r["id"] for r in store.list("mentors").records] == ["m1"]

    def test_remove_by_id(self, store):
        store.append("founders", make_record("1"))
        store.append("founders", make_record("2"))

        removed = store.remove_by_id("founders", "1")

        assert removed == 1
        assert [r["id"] for r in store.list("founders").records] == ["2"]

    def test_remove_missing_id_is_not_an_error(self, store):
        store.append("founders", make_record("1"))

        assert store.remove_by_id("founders", "nope") == 0
        assert len(store.list("founders").records) == 1

    def test_no_temp_files_left_behind(self, store):
        store.append("founders", make_record("1"))
        store.remove_by_id("founders", "1")

        leftovers = [p.name for p in store.data_dir.iterdir() if p.suffix == ".tmp"]
        assert leftovers == []

    def test_check_passes(self, store):
        store.check()


# =============================================================================
# Read Failures
# =============================================================================

class TestJsonFileStoreReadFailures:
    """A corrupt collection is distinguishable from an empty one."""

    def test_invalid_json_reported(self, store):
        store.path_for("founders").write_text("{not json", encoding="utf-8")

        result = store.list("founders")

        assert not result.ok
        assert result.records == []
        assert result.error

    def test_non_array_reported(self, store):
        store.path_for("founders").write_text('{"id": "1"}', encoding="utf-8")

        result = store.list("founders")

        assert not result.ok
        assert "JSON array" in result.error

    def test_append_refuses_to_overwrite_unreadable_file(self, store):
        path = store.path_for("founders")
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageReadError):
            store.append("founders", make_record("1"))

        assert path.read_text(encoding="utf-8") == "{not json"

    def test_remove_refuses_to_overwrite_unreadable_file(self, store):
        path = store.path_for("mentors")
        path.write_text("[oops", encoding="utf-8")

        with pytest.raises(StorageReadError):
            store.remove_by_id("mentors", "1")

        assert path.read_text(encoding="utf-8") == "[oops"


# =============================================================================
# Write Failures
# =============================================================================

class TestJsonFileStoreWriteFailures:
    """Writes that can't be persisted surface as StorageWriteError."""

    def test_append_write_failure_raises(self, store, monkeypatch):
        store.append("founders", make_record("1"))

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(json_store.os, "replace", broken_replace)

        with pytest.raises(StorageWriteError) as exc_info:
            store.append("founders", make_record("2"))

        assert exc_info.value.status_code == 500
        assert "disk full" in exc_info.value.details["error"]

    def test_failed_write_keeps_previous_contents(self, store, monkeypatch):
        store.append("founders", make_record("1"))

        def broken_replace(src, dst):
            raise OSError("boom")

        monkeypatch.setattr(json_store.os, "replace", broken_replace)

        with pytest.raises(StorageWriteError):
            store.remove_by_id("founders", "1")

        monkeypatch.undo()
        assert [r["id"] for r in store.list("founders").records] == ["1"]
        assert [p for p in store.data_dir.iterdir() if p.suffix == ".tmp"] == []

    def test_unserialisable_record_raises(self, store):
        with pytest.raises(StorageWriteError):
            store.append("founders", {"id": "1", "blob": object()})


# =============================================================================
# Concurrency
# =============================================================================

class TestJsonFileStoreConcurrency:
    """Per-collection locking: concurrent appends never lose updates."""

    def test_one_lock_per_collection(self, store):
        assert store._lock_for("founders") is store._lock_for("founders")
        assert store._lock_for("founders") is not store._lock_for("mentors")

    def test_concurrent_appends_all_persist(self, store):
        workers = 16
        per_worker = 5
        barrier = threading.Barrier(workers)

        def worker(n: int):
            barrier.wait()
            for i in range(per_worker):
                store.append("founders", make_record(f"{n}-{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = {r["id"] for r in store.list("founders").records}
        assert len(ids) == workers * per_worker

    def test_concurrent_append_and_remove(self, store):
        for i in range(20):
            store.append("mentors", make_record(f"old-{i}"))

        def remover():
            for i in range(20):
                store.remove_by_id("mentors", f"old-{i}")

        def appender():
            for i in range(20):
                store.append("mentors", make_record(f"new-{i}"))

        threads = [threading.Thread(target=remover), threading.Thread(target=appender)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = sorted(r["id"] for r in store.list("mentors").records)
        assert ids == sorted(f"new-{i}" for i in range(20))
