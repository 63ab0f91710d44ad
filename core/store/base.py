# =============================================================================
# core/store/base.py - Record Store Contract
# =============================================================================
# Every backend stores one logical collection per entity kind and supports
# three operations: list, append and remove_by_id.
#
# Reads return a ReadResult instead of raising, so callers can tell an empty
# collection apart from one that couldn't be read and decide for themselves
# whether to fail open. Writes raise StorageWriteError.
# =============================================================================

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from core.models.records import Record


@dataclass
class ReadResult:
    """
    Outcome of reading a collection.

    Attributes:
        records: Records as stored (empty when the read failed)
        error: None on success, otherwise what went wrong
    """
    records: list[Record] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: str) -> "ReadResult":
        return cls(records=[], error=error)


class RecordStore(ABC):
    """Persistence for founders, investors and mentors."""

    @abstractmethod
    def list(self, collection: str) -> ReadResult:
        """Return every record in the collection."""

    @abstractmethod
    def append(self, collection: str, record: Record) -> Record:
        """
        Persist a new record and return it as stored.

        Raises:
            StorageReadError: If the collection couldn't be loaded first
            StorageWriteError: If the change couldn't be persisted
        """

    @abstractmethod
    def remove_by_id(self, collection: str, record_id: str) -> int:
        """
        Delete the record with this id, if any.

        Returns:
            Number of records removed (0 is not an error)
        """

    @abstractmethod
    def check(self) -> None:
        """Raise if the backend isn't usable (readiness probe)."""
