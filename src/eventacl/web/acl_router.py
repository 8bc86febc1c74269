"""FastAPI router for relationship ACL checks (host integration)."""

from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from eventacl.acl.context import RequestContext
from eventacl.acl.service import EventACLService
from eventacl.core.types import RequestKind

router = APIRouter()


class FilterRequest(BaseModel):
    """Candidate rows keyed by resource id."""

    request_kind: RequestKind
    rows: dict[int, dict[str, Any]] = Field(default_factory=dict)


class FilterResponse(BaseModel):
    rows: dict[int, dict[str, Any]]
    row_count: int
    rows_empty: bool


class CheckRequest(BaseModel):
    request_kind: RequestKind
    resource_id: int


class OwnerAssignment(BaseModel):
    owner_party_id: int = Field(gt=0)


def _service(request: Request) -> EventACLService:
    service = getattr(request.app.state, "acl_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="ACL service not available")
    return service


def _host_user(request: Request) -> str | None:
    return getattr(request.state, "host_user_id", None)


async def get_request_context(request: Request) -> RequestContext:
    """Fresh context for every request, evaluated at today's date."""
    return await _service(request).context_for_user(_host_user(request))


@router.get("/api/acl/closure")
async def get_closure(
    request: Request, as_of: date | None = None
) -> dict[str, Any]:
    """Parties the caller may edit through relationships.

    ``as_of`` shows the closure on another date. It only applies to this
    read-only view; filters, checks and owner writes always use today.
    """
    service = _service(request)
    context = await service.context_for_user(_host_user(request), as_of=as_of)
    parties = await service.allowed_parties(context)
    return {
        "party_id": context.party_id,
        "as_of": context.as_of.isoformat(),
        "parties": sorted(parties),
    }


@router.post("/api/acl/filter", response_model=FilterResponse)
async def filter_rows(
    body: FilterRequest,
    request: Request,
    context: RequestContext = Depends(get_request_context),
) -> FilterResponse:
    """Drop the rows whose owner the caller may not edit."""
    try:
        kept = await _service(request).filter_rows(body.request_kind, body.rows, context)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return FilterResponse(rows=kept, row_count=len(kept), rows_empty=not kept)


@router.post("/api/acl/check")
async def check_access(
    body: CheckRequest,
    request: Request,
    context: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    """Gate one record. Denial is answered with 403."""
    try:
        await _service(request).require_allowed(body.request_kind, body.resource_id, context)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"allowed": True, "resource_id": body.resource_id}


@router.put("/api/acl/events/{event_id}/owner")
async def assign_event_owner(
    event_id: int,
    body: OwnerAssignment,
    request: Request,
    context: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    await _service(request).assign_event_owner(event_id, body.owner_party_id, context)
    return {"event_id": event_id, "owner_party_id": body.owner_party_id}
