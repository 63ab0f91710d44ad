# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns the process-wide Supabase client used by the document
# database record store. It implements the singleton pattern so every
# request reuses one connection.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   client.table("founders").select("*").execute()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error during Supabase setup or operations.

    Carries a suggestion so startup failures point at the missing setting.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Lazily created, shared Supabase client.

    Example:
        client = SupabaseClient.get_client()
        rows = client.table("mentors").select("*").execute().data
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses the service_role key, which bypasses Row Level Security.
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If the project isn't configured or creation fails
        """
        if cls._instance is None:
            if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
                raise SupabaseClientError(
                    message="Supabase is not configured",
                    code="CLIENT_NOT_CONFIGURED",
                    suggestion="Set SUPABASE_URL and SUPABASE_SERVICE_KEY, or use STORAGE_BACKEND=file"
                )
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance
