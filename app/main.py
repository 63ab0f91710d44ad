# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Udaaro API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 5000
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    UdaaroException,
    udaaro_exception_handler,
    validation_exception_handler,
)
from app.routers import health, entities
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the effective configuration on startup; nothing to tear down.
    """
    logger.info(f"Starting Udaaro API in {settings.ENVIRONMENT} mode")
    logger.info(f"Storage backend: {settings.STORAGE_BACKEND}")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        logger.info(f"Admin credential will be read from {settings.admin_credentials_path}")

    yield

    logger.info("Shutting down Udaaro API")


# Create FastAPI application
app = FastAPI(
    title="Udaaro API",
    description="""
## Startup Matchmaking Backend

Register founders, investors and mentors; an admin reviews and prunes them.

### Endpoints

| Method | Path | Auth |
|--------|------|------|
| POST | /api/admin/login | - |
| POST | /api/{founders,investors,mentors} | - |
| GET | /api/{founders,investors,mentors} | Bearer |
| DELETE | /api/{type}/{id} | Bearer |

### Quick Start

```bash
# 1. Log in
curl -X POST http://localhost:5000/api/admin/login \\
  -H "Content-Type: application/json" \\
  -d '{"email": "admin@example.com", "password": "..."}'

# 2. List founders
curl http://localhost:5000/api/founders -H "Authorization: Bearer <token>"
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Admin login",
        },
        {
            "name": "Records",
            "description": "Register, list and delete founders, investors and mentors",
        },
        {
            "name": "Health",
            "description": "Liveness and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows the frontend origins to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(UdaaroException)
async def handle_udaaro_exception(request: Request, exc: UdaaroException):
    """Handle custom Udaaro exceptions."""
    return await udaaro_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected error occurred"}
    )


# =============================================================================
# Routers
# =============================================================================

# Health and liveness endpoints
app.include_router(
    health.router,
    tags=["Health"]
)

# Admin login
app.include_router(
    auth_routes.router,
    prefix="/api/admin",
    tags=["Auth"]
)

# Founder / investor / mentor endpoints
app.include_router(
    entities.router,
    prefix="/api",
    tags=["Records"]
)
