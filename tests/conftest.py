# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a JSON file store on a temp dir, a known admin credential,
#   and a TestClient wired to both through dependency overrides
# =============================================================================

import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789")
os.environ.setdefault("STORAGE_BACKEND", "file")
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="udaaro-test-"))

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_auth_service, get_record_store
from app.main import app
from core.models.auth import AdminCredential
from core.services.auth_service import AuthService
from core.services.entity_service import EntityService
from core.store.json_store import JsonFileStore

ADMIN_EMAIL = "admin@x.com"
ADMIN_PASSWORD = "pw"
TEST_SECRET = "test-secret-key-0123456789"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def data_dir(tmp_path):
    """Fresh data directory per test."""
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    """JSON file store rooted in the per-test data directory."""
    return JsonFileStore(data_dir)


@pytest.fixture
def entity_service(store):
    return EntityService(store)


@pytest.fixture
def admin_credential():
    return AdminCredential(email=ADMIN_EMAIL, password=ADMIN_PASSWORD)


@pytest.fixture
def auth_service(admin_credential):
    """AuthService that always sees the test admin credential."""
    return AuthService(secret_key=TEST_SECRET, credential_loader=lambda: admin_credential)


@pytest.fixture
def client(store, auth_service):
    """TestClient using the per-test store and auth service."""
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_auth_service] = lambda: auth_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(auth_service):
    """Authorization header carrying a fresh admin token."""
    token = auth_service.issue_token(ADMIN_EMAIL)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_founder():
    """Sample founder payload."""
    return {
        "name": "Asha Rao",
        "email": "asha@acme.io",
        "phone": "+91 98765 43210",
        "startup": "Acme Robotics",
        "stage": "seed",
    }


@pytest.fixture
def sample_mentor():
    """Sample mentor payload."""
    return {"name": "A", "email": "a@b.com", "expertise": "AI"}
