"""
Schemas for the deprecated equipment endpoint.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field


class LegacyEquipmentWrite(BaseModel):
    # The first clients sent Indonesian keys; both spellings are accepted.
    name: str = Field(default="", validation_alias=AliasChoices("name", "nama"))
    price: int = Field(default=0, validation_alias=AliasChoices("price", "harga"))
    category: str = Field(default="", validation_alias=AliasChoices("category", "kategori"))
    photo_url: str = Field(default="", validation_alias=AliasChoices("photo_url", "fotourl"))


class LegacyEquipmentRecord(BaseModel):
    id: int
    name: str
    price: int
    category: str
    photo_url: str
