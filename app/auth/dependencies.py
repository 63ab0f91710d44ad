# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Guards protected routes with the admin bearer token.
#
# Usage:
#   from app.auth import require_admin
#
#   @router.get("/protected")
#   async def protected(admin: AdminIdentity = Depends(require_admin)):
#       return {"email": admin.email}
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.dependencies import AuthServiceDep
from app.exceptions import AccessDeniedError
from core.models.auth import AdminIdentity

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor. auto_error is off so a missing header
# produces our own "Access denied" response instead of FastAPI's 403.
# HTTPBearer matches the scheme case-insensitively; require_admin insists
# on the exact "Bearer" spelling.
BEARER_SCHEME = "Bearer"
security = HTTPBearer(auto_error=False)


async def require_admin(
    auth: AuthServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AdminIdentity:
    """
    Require a valid admin token.

    Raises:
        AccessDeniedError: 401 if no "Authorization: Bearer <token>" header
            (the scheme is case-sensitive)
        InvalidTokenError: 401 if the token is forged, malformed or expired
    """
    if credentials is None or credentials.scheme != BEARER_SCHEME:
        logger.debug("Protected route called without bearer token")
        raise AccessDeniedError()

    return auth.verify_token(credentials.credentials)
