# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the record and auth models:
# - name/email are required and trimmed
# - optional fields are kept verbatim, unknown fields are dropped
# - EntityKind resolves collection names
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from app.exceptions import InvalidCollectionError
from core.models import (
    AdminCredential,
    EntityKind,
    FounderCreate,
    InvestorCreate,
    MentorCreate,
)


# =============================================================================
# Record Schema Tests
# =============================================================================

class TestRecordCreate:
    """Tests for the per-kind create schemas."""

    def test_valid_founder(self, sample_founder):
        """Test creating a valid FounderCreate."""
        founder = FounderCreate(**sample_founder)

        assert founder.name == "Asha Rao"
        assert founder.startup == "Acme Robotics"

    def test_name_and_email_are_trimmed(self):
        mentor = MentorCreate(name="  Ravi  ", email=" ravi@x.io\n")

        assert mentor.name == "Ravi"
        assert mentor.email == "ravi@x.io"

    @pytest.mark.parametrize("payload", [
        {"email": "a@b.com"},
        {"name": "A"},
        {"name": "   ", "email": "a@b.com"},
        {"name": "A", "email": ""},
        {"name": None, "email": "a@b.com"},
        {"name": 42, "email": "a@b.com"},
    ])
    def test_missing_or_blank_required_fields_rejected(self, payload):
        with pytest.raises(ValidationError):
            InvestorCreate(**payload)

    def test_to_fields_only_includes_sent_optionals(self):
        fields = MentorCreate(name="A", email="a@b.com", expertise="AI").to_fields()

        assert fields == {"name": "A", "email": "a@b.com", "expertise": "AI"}

    def test_optional_fields_kept_verbatim(self):
        """Optional fields aren't type-checked."""
        fields = InvestorCreate(
            name="Meera", email="m@fund.vc", ticketSize=250000, focus=["fintech", "ai"]
        ).to_fields()

        assert fields["ticketSize"] == 250000
        assert fields["focus"] == ["fintech", "ai"]

    def test_unknown_fields_dropped(self):
        fields = FounderCreate.model_validate(
            {"name": "A", "email": "a@b.com", "isAdmin": True, "id": "forged"}
        ).to_fields()

        assert "isAdmin" not in fields
        assert "id" not in fields

    def test_fields_belong_to_their_kind(self):
        """A mentor field sent to founders is not kept."""
        fields = FounderCreate.model_validate(
            {"name": "A", "email": "a@b.com", "expertise": "AI"}
        ).to_fields()

        assert "expertise" not in fields


# =============================================================================
# EntityKind Tests
# =============================================================================

class TestEntityKind:
    """Tests for EntityKind."""

    @pytest.mark.parametrize("name,schema", [
        ("founders", FounderCreate),
        ("investors", InvestorCreate),
        ("mentors", MentorCreate),
    ])
    def test_from_collection(self, name, schema):
        kind = EntityKind.from_collection(name)

        assert kind.value == name
        assert kind.schema is schema

    @pytest.mark.parametrize("name", ["users", "founder", "FOUNDERS", ""])
    def test_unknown_collection(self, name):
        with pytest.raises(InvalidCollectionError) as exc_info:
            EntityKind.from_collection(name)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid type"


class TestAdminCredential:
    """Tests for AdminCredential."""

    def test_is_immutable(self, admin_credential):
        with pytest.raises(ValidationError):
            admin_credential.email = "other@x.com"

    def test_equality(self):
        assert AdminCredential(email="a", password="b") == AdminCredential(email="a", password="b")
