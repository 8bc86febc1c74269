"""FastAPI router for the extension settings screen."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from eventacl.admin.service import OK, AdminConfigService

router = APIRouter()


class ConfigRowRequest(BaseModel):
    config_key: str = ""
    config_value: str = ""


def _admin(request: Request) -> AdminConfigService:
    service = getattr(request.app.state, "admin_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Admin service not available")
    return service


@router.get("/api/admin/config")
async def get_config(request: Request) -> dict[str, str]:
    return await _admin(request).get_all_rows()


@router.post("/api/admin/config")
async def save_config_row(body: ConfigRowRequest, request: Request) -> dict[str, Any]:
    result = await _admin(request).save_row(body.model_dump())
    if result != OK:
        raise HTTPException(status_code=400, detail=result)
    return {"result": result}


@router.delete("/api/admin/config/{config_key}")
async def delete_config_row(config_key: str, request: Request) -> dict[str, Any]:
    result = await _admin(request).delete_row({"config_key": config_key})
    if result != OK:
        raise HTTPException(status_code=400, detail=result)
    return {"result": result}
