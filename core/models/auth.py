# =============================================================================
# core/models/auth.py - Admin Authentication Models
# =============================================================================
# Pydantic models for the admin login flow.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """
    Body of POST /api/admin/login.

    Values are left untyped so a wrong type is a failed login, not a
    malformed request.
    """
    email: Any = None
    password: Any = None


class TokenResponse(BaseModel):
    """Successful login response."""
    token: str


class AdminCredential(BaseModel):
    """
    The single admin email/password pair.

    Loaded from settings or the credentials file on every login so that
    rotating the file doesn't need a restart.
    """
    model_config = ConfigDict(frozen=True)

    email: str
    password: str


class AdminIdentity(BaseModel):
    """
    Admin extracted from a verified token.

    This is everything the token carries; there are no roles or scopes.
    """
    model_config = ConfigDict(frozen=True)

    email: str | None = None


class TokenPayload(BaseModel):
    """Decoded JWT claims issued by AuthService."""
    email: str | None = None
    iat: int
    exp: int
