"""
Pydantic schemas for the equipment listing endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class EquipmentWrite(BaseModel):
    """
    Body for create and full-replace update.

    Presence of `photo` and `name` is checked in the service layer so that a
    blank value and a missing key fail the same way. Unknown keys (including
    `id`, `created_at`, `updated_at`) are ignored.
    """

    photo: str = ""
    name: str = ""
    price_per_week: float = Field(default=0.0, allow_inf_nan=False)
    category: str = ""


class EquipmentRecord(BaseModel):
    id: int
    photo: str
    name: str
    price_per_week: float
    category: str
    created_at: datetime
    updated_at: datetime


class DeletedResponse(BaseModel):
    deleted: int
