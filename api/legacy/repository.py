"""
Persistence for the deprecated endpoint (table `alatpertanian_legacy`).
"""

from __future__ import annotations

from core import db


async def list_records() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, price, category, photo_url
        FROM alatpertanian_legacy
        ORDER BY id
        """
    )


async def insert_record(*, name: str, price: int, category: str, photo_url: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO alatpertanian_legacy (name, price, category, photo_url)
        VALUES ($1, $2, $3, $4)
        RETURNING id, name, price, category, photo_url
        """,
        name,
        price,
        category,
        photo_url,
    )
    if row is None:
        raise db.StoreError("Failed to insert equipment record.")
    return row


async def update_record(record_id: int, *, name: str, price: int, category: str, photo_url: str) -> int:
    """
    Overwrite every column; returns the number of rows touched (0 or 1).
    """
    status = await db.execute(
        """
        UPDATE alatpertanian_legacy
        SET name = $1, price = $2, category = $3, photo_url = $4
        WHERE id = $5
        """,
        name,
        price,
        category,
        photo_url,
        record_id,
    )
    return db.affected_rows(status)


async def delete_record(record_id: int) -> int:
    status = await db.execute(
        """
        DELETE FROM alatpertanian_legacy
        WHERE id = $1
        """,
        record_id,
    )
    return db.affected_rows(status)
