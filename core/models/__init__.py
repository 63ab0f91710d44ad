# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - records.py: Founder / Investor / Mentor create schemas and EntityKind
# - auth.py: Admin login request/response and token models
#
# These models define the "contract" between API and clients.
# =============================================================================

from .records import (
    EntityKind,
    FounderCreate,
    InvestorCreate,
    MentorCreate,
    Record,
    RecordCreate,
)
from .auth import (
    AdminCredential,
    AdminIdentity,
    LoginRequest,
    TokenPayload,
    TokenResponse,
)

__all__ = [
    # Records
    "EntityKind",
    "FounderCreate",
    "InvestorCreate",
    "MentorCreate",
    "Record",
    "RecordCreate",
    # Auth
    "AdminCredential",
    "AdminIdentity",
    "LoginRequest",
    "TokenPayload",
    "TokenResponse",
]
