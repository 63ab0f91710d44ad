# =============================================================================
# core/models/records.py - Founder / Investor / Mentor Schemas
# =============================================================================
# These models define what a create request may carry for each entity kind:
# - FounderCreate, InvestorCreate, MentorCreate: accepted payload fields
# - EntityKind: the three collections and the schema that guards each
#
# A stored record is a flat JSON object:
#   {"id": ..., "createdAt": ..., "name": ..., "email": ..., <optional fields>}
# Optional fields are kept verbatim; fields a schema doesn't know are dropped.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.exceptions import InvalidCollectionError

# A persisted record, exactly as it travels over the wire
Record = dict[str, Any]


class RecordCreate(BaseModel):
    """
    Fields every entity kind requires.

    name and email must be non-empty once surrounding whitespace is removed;
    they are stored trimmed.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email")

    @field_validator("name", "email")
    @classmethod
    def strip_and_require(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    def to_fields(self) -> dict[str, Any]:
        """Required fields plus whichever optional fields the client sent."""
        return self.model_dump(exclude_unset=True)


class FounderCreate(RecordCreate):
    """
    Founder registration.

    Example:
        {"name": "Asha", "email": "asha@acme.io", "startup": "Acme", "stage": "seed"}
    """

    phone: Any = None
    startup: Any = None
    stage: Any = None
    industry: Any = None
    website: Any = None
    linkedin: Any = None
    location: Any = None
    pitch: Any = None


class InvestorCreate(RecordCreate):
    """Investor registration."""

    phone: Any = None
    firm: Any = None
    focus: Any = None
    ticketSize: Any = None
    stage: Any = None
    website: Any = None
    linkedin: Any = None
    location: Any = None


class MentorCreate(RecordCreate):
    """Mentor registration."""

    phone: Any = None
    expertise: Any = None
    experience: Any = None
    company: Any = None
    linkedin: Any = None
    availability: Any = None
    location: Any = None


class EntityKind(str, Enum):
    """
    The three collections exposed under /api/{collection}.

    The value doubles as the collection name used by the record store
    (founders.json, table "founders", ...).
    """
    FOUNDERS = "founders"
    INVESTORS = "investors"
    MENTORS = "mentors"

    @classmethod
    def from_collection(cls, name: str) -> "EntityKind":
        """Resolve a path segment, raising InvalidCollectionError for anything else."""
        try:
            return cls(name)
        except ValueError:
            raise InvalidCollectionError(name)

    @property
    def schema(self) -> type[RecordCreate]:
        return _SCHEMAS[self]


_SCHEMAS: dict[EntityKind, type[RecordCreate]] = {
    EntityKind.FOUNDERS: FounderCreate,
    EntityKind.INVESTORS: InvestorCreate,
    EntityKind.MENTORS: MentorCreate,
}
