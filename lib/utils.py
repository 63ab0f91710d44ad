# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone
from uuid import uuid4


# =============================================================================
# Id Utilities
# =============================================================================

def new_record_id() -> str:
    """Fresh random identifier for a record."""
    return str(uuid4())


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(moment: datetime) -> str:
    """
    Format a datetime the way records store it: UTC, millisecond precision,
    trailing "Z" (e.g. "2024-01-15T10:30:00.123Z").
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """Parse a timestamp produced by to_iso (or by Postgres)."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
