# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Liveness text and health check endpoints
# - entities.py: Founder / investor / mentor endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import entities

__all__ = [
    "health",
    "entities",
]
