from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from equipment import repository as equipment_repository
from legacy import repository as legacy_repository
from main import create_app


class FakeEquipmentStore:
    """In-memory stand-in for `equipment.repository`."""

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self._next_id = 1
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _now(self) -> datetime:
        self._clock += timedelta(milliseconds=1)
        return self._clock

    async def list_records(self) -> list[dict]:
        return [dict(self.rows[k]) for k in sorted(self.rows, reverse=True)]

    async def get_record(self, record_id: int) -> dict | None:
        row = self.rows.get(record_id)
        return dict(row) if row is not None else None

    async def insert_record(self, *, photo: str, name: str, price_per_week: float, category: str) -> dict:
        now = self._now()
        row = {
            "id": self._next_id,
            "photo": photo,
            "name": name,
            "price_per_week": price_per_week,
            "category": category,
            "created_at": now,
            "updated_at": now,
        }
        self.rows[row["id"]] = row
        self._next_id += 1
        return dict(row)

    async def update_record(
        self,
        record_id: int,
        *,
        photo: str,
        name: str,
        price_per_week: float,
        category: str,
    ) -> dict | None:
        row = self.rows.get(record_id)
        if row is None:
            return None
        row.update(
            photo=photo,
            name=name,
            price_per_week=price_per_week,
            category=category,
            updated_at=self._now(),
        )
        return dict(row)

    async def delete_record(self, record_id: int) -> bool:
        return self.rows.pop(record_id, None) is not None


class FakeLegacyStore:
    """In-memory stand-in for `legacy.repository`."""

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self._next_id = 1

    async def list_records(self) -> list[dict]:
        return [dict(self.rows[k]) for k in sorted(self.rows)]

    async def insert_record(self, *, name: str, price: int, category: str, photo_url: str) -> dict:
        row = {"id": self._next_id, "name": name, "price": price, "category": category, "photo_url": photo_url}
        self.rows[row["id"]] = row
        self._next_id += 1
        return dict(row)

    async def update_record(self, record_id: int, *, name: str, price: int, category: str, photo_url: str) -> int:
        row = self.rows.get(record_id)
        if row is None:
            return 0
        row.update(name=name, price=price, category=category, photo_url=photo_url)
        return 1

    async def delete_record(self, record_id: int) -> int:
        return 1 if self.rows.pop(record_id, None) is not None else 0


def _patch_module(monkeypatch: pytest.MonkeyPatch, module, store) -> None:
    for name in ("list_records", "get_record", "insert_record", "update_record", "delete_record"):
        if hasattr(module, name):
            monkeypatch.setattr(module, name, getattr(store, name))


@pytest.fixture
def equipment_store(monkeypatch: pytest.MonkeyPatch) -> FakeEquipmentStore:
    store = FakeEquipmentStore()
    _patch_module(monkeypatch, equipment_repository, store)
    return store


@pytest.fixture
def legacy_store(monkeypatch: pytest.MonkeyPatch) -> FakeLegacyStore:
    store = FakeLegacyStore()
    _patch_module(monkeypatch, legacy_repository, store)
    return store


@pytest_asyncio.fixture
async def app_client(equipment_store: FakeEquipmentStore, legacy_store: FakeLegacyStore):
    # ASGITransport does not run the lifespan, so no DB pool is opened here.
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
