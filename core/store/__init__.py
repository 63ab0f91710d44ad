# =============================================================================
# core/store/ - Record Store Backends
# =============================================================================
# - base.py: RecordStore contract and ReadResult
# - json_store.py: one JSON array file per collection
# - supabase_store.py: one Supabase table per collection
# - factory.py: picks a backend from settings
# =============================================================================

from .base import ReadResult, RecordStore
from .json_store import JsonFileStore
from .factory import build_store

__all__ = [
    "ReadResult",
    "RecordStore",
    "JsonFileStore",
    "build_store",
]
