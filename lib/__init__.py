# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Shared Supabase client for the database record store
# - utils.py: Shared utilities (ids, timestamps)
#
# supabase_client is imported on demand so the file backend doesn't need a
# configured Supabase project.
# =============================================================================

from lib.utils import new_record_id, parse_iso, to_iso, utc_now

__all__ = [
    "new_record_id",
    "parse_iso",
    "to_iso",
    "utc_now",
]
