# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .entity_service import EntityService
from .auth_service import AuthService, settings_credential_loader

__all__ = [
    "EntityService",
    "AuthService",
    "settings_credential_loader",
]
