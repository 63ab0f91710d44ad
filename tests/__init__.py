# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Udaaro API:
# - test_models.py: Record and auth schema validation
# - test_json_store.py / test_supabase_store.py: Record store backends
# - test_entity_service.py: Create / list / delete logic
# - test_auth_service.py: Admin login, tokens, credential sources
# - test_api.py: HTTP endpoints through TestClient
# - test_config.py: Settings and backend selection
#
# Run tests with: pytest
# =============================================================================
