"""
Equipment listing persistence (raw SQL against `alatpertanian`).
"""

from __future__ import annotations

from core import db

TABLE_COLUMNS = "id, photo, name, price_per_week, category, created_at, updated_at"


async def list_records() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {TABLE_COLUMNS}
        FROM alatpertanian
        ORDER BY id DESC
        """
    )


async def get_record(record_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {TABLE_COLUMNS}
        FROM alatpertanian
        WHERE id = $1
        """,
        record_id,
    )


async def insert_record(*, photo: str, name: str, price_per_week: float, category: str) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO alatpertanian (photo, name, price_per_week, category, created_at, updated_at)
        VALUES ($1, $2, $3, $4, now(), now())
        RETURNING {TABLE_COLUMNS}
        """,
        photo,
        name,
        price_per_week,
        category,
    )
    if row is None:
        raise db.StoreError("Failed to insert equipment record.")
    return row


async def update_record(
    record_id: int,
    *,
    photo: str,
    name: str,
    price_per_week: float,
    category: str,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE alatpertanian
        SET photo = $1,
            name = $2,
            price_per_week = $3,
            category = $4,
            updated_at = clock_timestamp()
        WHERE id = $5
        RETURNING {TABLE_COLUMNS}
        """,
        photo,
        name,
        price_per_week,
        category,
        record_id,
    )


async def delete_record(record_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM alatpertanian
        WHERE id = $1
        RETURNING id
        """,
        record_id,
    )
    return row is not None
