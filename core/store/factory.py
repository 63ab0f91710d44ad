# =============================================================================
# core/store/factory.py - Record Store Selection
# =============================================================================
# Builds the record store named by STORAGE_BACKEND.
# =============================================================================

import logging

from app.config import Settings
from core.store.base import RecordStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> RecordStore:
    """
    Create the configured record store.

    Args:
        settings: Application settings

    Returns:
        JsonFileStore for "file", SupabaseRecordStore for "supabase"
    """
    if settings.STORAGE_BACKEND == "supabase":
        from core.store.supabase_store import SupabaseRecordStore

        logger.info("Using Supabase record store")
        return SupabaseRecordStore()

    from core.store.json_store import JsonFileStore

    logger.info(f"Using JSON file record store in {settings.data_path.resolve()}")
    return JsonFileStore(settings.data_path)
