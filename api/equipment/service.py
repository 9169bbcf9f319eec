"""
Equipment listing logic: presence checks and not-found mapping.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_record(row: dict) -> schemas.EquipmentRecord:
    return schemas.EquipmentRecord(
        id=int(row["id"]),
        photo=str(row["photo"]),
        name=str(row["name"]),
        price_per_week=float(row["price_per_week"]),
        category=str(row["category"] or ""),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _required_fields(payload: schemas.EquipmentWrite) -> dict:
    photo = (payload.photo or "").strip()
    name = (payload.name or "").strip()
    if not photo:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="photo is required.")
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="name is required.")
    return {
        "photo": photo,
        "name": name,
        "price_per_week": float(payload.price_per_week),
        "category": payload.category or "",
    }


async def list_equipment() -> list[schemas.EquipmentRecord]:
    rows = await repository.list_records()
    return [_to_record(row) for row in rows]


async def get_equipment(record_id: int) -> schemas.EquipmentRecord:
    row = await repository.get_record(record_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Equipment not found.")
    return _to_record(row)


async def create_equipment(payload: schemas.EquipmentWrite) -> schemas.EquipmentRecord:
    fields = _required_fields(payload)
    row = await repository.insert_record(**fields)
    logger.info("equipment_created id=%s", row["id"])
    return _to_record(row)


async def update_equipment(record_id: int, payload: schemas.EquipmentWrite) -> schemas.EquipmentRecord:
    fields = _required_fields(payload)
    row = await repository.update_record(record_id, **fields)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Equipment not found.")
    return _to_record(row)


async def delete_equipment(record_id: int) -> schemas.DeletedResponse:
    deleted = await repository.delete_record(record_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Equipment not found.")
    logger.info("equipment_deleted id=%s", record_id)
    return schemas.DeletedResponse(deleted=record_id)
