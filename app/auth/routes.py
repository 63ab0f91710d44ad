# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# POST /api/admin/login exchanges the admin email/password for a token.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body

from app.dependencies import AuthServiceDep
from core.models.auth import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login(
    auth: AuthServiceDep,
    body: Annotated[Any, Body(description="{email, password}")] = None,
) -> TokenResponse:
    """
    Log in as the admin.

    A missing or non-object body counts as empty credentials.

    Returns:
        TokenResponse: Bearer token valid for one hour

    Raises:
        401: If the email or password is wrong
        500: If no admin credential is configured
    """
    request = LoginRequest.model_validate(body) if isinstance(body, dict) else LoginRequest()

    token = auth.login(request.email, request.password)
    return TokenResponse(token=token)
