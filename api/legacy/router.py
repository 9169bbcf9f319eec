"""
Deprecated equipment endpoint (`/api/legacy/alatpertanian?id=`).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Query, Request, Response

from core import db

from . import repository, schemas

PREFIX = "/api/legacy/alatpertanian"
SUCCESSOR_PATH = "/api/alatpertanian"

logger = logging.getLogger(__name__)


async def deprecation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    Mark every response under PREFIX (errors included) as deprecated.
    """
    response = await call_next(request)
    if request.url.path.startswith(PREFIX):
        response.headers["Deprecation"] = "true"
        response.headers["Link"] = f'<{SUCCESSOR_PATH}>; rel="successor-version"'
    return response


router = APIRouter(prefix=PREFIX)


def _to_record(row: dict) -> schemas.LegacyEquipmentRecord:
    return schemas.LegacyEquipmentRecord(
        id=int(row["id"]),
        name=str(row["name"] or ""),
        price=int(row["price"] or 0),
        category=str(row["category"] or ""),
        photo_url=str(row["photo_url"] or ""),
    )


@router.get("")
async def list_equipment() -> list[schemas.LegacyEquipmentRecord]:
    rows = await repository.list_records()
    return [_to_record(row) for row in rows]


@router.post("")
async def create_equipment(payload: schemas.LegacyEquipmentWrite) -> schemas.LegacyEquipmentRecord:
    row = await repository.insert_record(**payload.model_dump())
    return _to_record(row)


@router.put("")
async def update_equipment(
    payload: schemas.LegacyEquipmentWrite,
    item_id: int = Query(..., alias="id", ge=db.INT4_MIN, le=db.INT4_MAX),
) -> schemas.LegacyEquipmentRecord:
    """
    Overwrite all fields of row `id` and echo the body back.

    A missing row is not an error here: nothing is written and the body is
    still echoed with the requested id.
    """
    touched = await repository.update_record(item_id, **payload.model_dump())
    if touched == 0:
        logger.warning("legacy_update_no_rows id=%s", item_id)
    return schemas.LegacyEquipmentRecord(id=item_id, **payload.model_dump())


@router.delete("")
async def delete_equipment(item_id: int = Query(..., alias="id", ge=db.INT4_MIN, le=db.INT4_MAX)) -> dict:
    touched = await repository.delete_record(item_id)
    if touched == 0:
        logger.warning("legacy_delete_no_rows id=%s", item_id)
    return {"deleted": item_id}
