# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Admin login route and the bearer-token guard for protected routes.
#
# Usage:
#   from app.auth import require_admin
# =============================================================================

from app.auth.dependencies import require_admin

__all__ = [
    "require_admin",
]
