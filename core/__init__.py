# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the logic behind the HTTP surface:
# - models/: Pydantic schemas for records and admin auth
# - store/: Record store backends (JSON files, Supabase tables)
# - services/: EntityService and AuthService
#
# Route handlers stay thin and delegate here.
# =============================================================================
