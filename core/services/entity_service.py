# =============================================================================
# core/services/entity_service.py - Founder / Investor / Mentor Logic
# =============================================================================
# One service handles all three entity kinds. The kind decides which schema
# validates a create payload and which collection the record store touches.
# Separates HTTP concerns from storage and validation.
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from app.exceptions import InvalidPayloadError, RecordValidationError, StorageReadError
from core.models.records import EntityKind, Record
from core.store.base import ReadResult, RecordStore
from lib.utils import new_record_id, to_iso, utc_now

logger = logging.getLogger(__name__)


class EntityService:
    """
    Create, list and delete records of any entity kind.

    Args:
        store: Record store the service reads and writes through
        fail_open_reads: When a collection can't be read, list() returns an
            empty result flagged with the error instead of raising
    """

    def __init__(self, store: RecordStore, fail_open_reads: bool = True):
        self.store = store
        self.fail_open_reads = fail_open_reads

    def create(self, kind: EntityKind, payload: Any) -> Record:
        """
        Validate a payload and persist it as a new record.

        Args:
            kind: Which collection the record belongs to
            payload: Decoded JSON request body (None when the request had none)

        Returns:
            The stored record, including its generated id and createdAt

        Raises:
            InvalidPayloadError: If the payload isn't a JSON object
            RecordValidationError: If name or email is missing or blank
            StorageReadError / StorageWriteError: If persisting fails
        """
        if payload is None:
            payload = {}

        if not isinstance(payload, dict):
            raise InvalidPayloadError(kind.value)

        try:
            fields = kind.schema.model_validate(payload).to_fields()
        except ValidationError as e:
            bad_fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            logger.info(f"Rejected {kind.value} payload: invalid {bad_fields}")
            raise RecordValidationError(kind.value, bad_fields)

        record: Record = {
            "id": new_record_id(),
            "createdAt": to_iso(utc_now()),
            **fields,
        }

        stored = self.store.append(kind.value, record)
        logger.info(f"Created {kind.value} record {stored['id']}")
        return stored

    def read(self, kind: EntityKind) -> ReadResult:
        """
        Read a collection, honouring the fail-open policy.

        Returns:
            ReadResult; when it isn't ok the records list is empty

        Raises:
            StorageReadError: If the read failed and fail_open_reads is off
        """
        result = self.store.list(kind.value)

        if not result.ok:
            if not self.fail_open_reads:
                raise StorageReadError(kind.value, result.error)
            logger.warning(f"Serving empty {kind.value} list after read failure: {result.error}")

        return result

    def list(self, kind: EntityKind) -> list[Record]:
        """All records of a kind, newest first where the store supports it."""
        return self.read(kind).records

    def delete_by_id(self, kind: EntityKind, record_id: str) -> int:
        """
        Remove a record. Deleting an id that doesn't exist is not an error.

        Returns:
            Number of records removed (0 or 1)
        """
        removed = self.store.remove_by_id(kind.value, record_id)

        if removed:
            logger.info(f"Deleted {kind.value} record {record_id}")
        else:
            logger.info(f"Delete of {kind.value} record {record_id} matched nothing")

        return removed
