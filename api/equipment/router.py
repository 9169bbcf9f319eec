"""
Equipment listing API endpoints (`/api/alatpertanian`).
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path

from core import db

from . import schemas, service

PREFIX = "/api/alatpertanian"

# Methods on these paths without an operation answer 404, not 405.
UNROUTED_COLLECTION_METHODS = ["PUT", "DELETE", "PATCH"]
UNROUTED_ITEM_METHODS = ["POST", "PATCH"]

router = APIRouter(prefix=PREFIX)


@router.get("")
async def list_equipment() -> list[schemas.EquipmentRecord]:
    """
    All listings, newest id first.
    """
    return await service.list_equipment()


@router.get("/{item_id}")
async def get_equipment(item_id: int = Path(..., ge=db.INT4_MIN, le=db.INT4_MAX)) -> schemas.EquipmentRecord:
    return await service.get_equipment(item_id)


@router.post("")
async def create_equipment(payload: schemas.EquipmentWrite) -> schemas.EquipmentRecord:
    return await service.create_equipment(payload)


@router.put("/{item_id}")
async def update_equipment(
    payload: schemas.EquipmentWrite,
    item_id: int = Path(..., ge=db.INT4_MIN, le=db.INT4_MAX),
) -> schemas.EquipmentRecord:
    """
    Full replace of the mutable fields; `created_at` is kept, `updated_at` moves.
    """
    return await service.update_equipment(item_id, payload)


@router.delete("/{item_id}")
async def delete_equipment(item_id: int = Path(..., ge=db.INT4_MIN, le=db.INT4_MAX)) -> schemas.DeletedResponse:
    return await service.delete_equipment(item_id)


@router.api_route("", methods=UNROUTED_COLLECTION_METHODS, include_in_schema=False)
@router.api_route("/{item_id}", methods=UNROUTED_ITEM_METHODS, include_in_schema=False)
async def not_routed(item_id: str | None = None) -> None:
    raise HTTPException(status_code=404, detail="Route not found.")
