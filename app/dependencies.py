# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends(); tests replace
# them through app.dependency_overrides.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.auth_service import AuthService, settings_credential_loader
from core.services.entity_service import EntityService
from core.store import RecordStore, build_store


@lru_cache
def get_record_store() -> RecordStore:
    """
    Get the record store for this process.

    Built once so every request shares the same per-collection locks
    (file backend) or client connection (Supabase).
    """
    return build_store(settings)


def get_entity_service(
    store: Annotated[RecordStore, Depends(get_record_store)],
) -> EntityService:
    return EntityService(store, fail_open_reads=settings.FAIL_OPEN_READS)


@lru_cache
def get_auth_service() -> AuthService:
    return AuthService(
        secret_key=settings.SECRET_KEY,
        credential_loader=settings_credential_loader(settings),
    )


# Type aliases for dependency injection
StoreDep = Annotated[RecordStore, Depends(get_record_store)]
EntityServiceDep = Annotated[EntityService, Depends(get_entity_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
