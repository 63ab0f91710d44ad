# =============================================================================
# app/routers/entities.py - Founder / Investor / Mentor Endpoints
# =============================================================================
# One set of routes serves all three collections:
#   GET    /api/{collection}              (admin)  list records
#   POST   /api/{collection}              (public) register a record
#   DELETE /api/{collection}/{record_id}  (admin)  remove a record
#
# {collection} is founders, investors or mentors; anything else is a 400.
#
# Handlers are plain functions: FastAPI runs them in its threadpool, so the
# blocking store calls never stall the event loop and concurrent requests
# meet the file store's per-collection locks.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import JSONResponse

from app.auth import require_admin
from app.dependencies import EntityServiceDep
from core.models.auth import AdminIdentity
from core.models.records import EntityKind

router = APIRouter()

# Set on list responses served empty because the collection couldn't be read
DEGRADED_HEADER = "X-Storage-Degraded"


@router.get("/{collection}")
def list_records(
    collection: Annotated[str, Path(description="founders, investors or mentors")],
    service: EntityServiceDep,
    admin: AdminIdentity = Depends(require_admin),
):
    """
    List every record in a collection.

    Newest first on the Supabase backend, insertion order on the file backend.
    """
    kind = EntityKind.from_collection(collection)
    result = service.read(kind)

    headers = None if result.ok else {DEGRADED_HEADER: "true"}
    return JSONResponse(content=result.records, headers=headers)


@router.post("/{collection}", status_code=status.HTTP_201_CREATED)
def create_record(
    collection: Annotated[str, Path(description="founders, investors or mentors")],
    service: EntityServiceDep,
    payload: Annotated[Any, Body(description="name and email are required")] = None,
):
    """
    Register a founder, investor or mentor.

    Returns the stored record with its generated id and createdAt.
    """
    kind = EntityKind.from_collection(collection)
    record = service.create(kind, payload)

    return JSONResponse(status_code=status.HTTP_201_CREATED, content=record)


@router.delete("/{collection}/{record_id}")
def delete_record(
    collection: Annotated[str, Path(description="founders, investors or mentors")],
    record_id: Annotated[str, Path(description="Record id")],
    service: EntityServiceDep,
    admin: AdminIdentity = Depends(require_admin),
):
    """
    Delete a record by id.

    Answers the same way whether or not the record existed.
    """
    kind = EntityKind.from_collection(collection)
    service.delete_by_id(kind, record_id)

    return {"message": "Deleted successfully"}
