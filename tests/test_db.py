import pytest

from core import db


def test_database_url_strips_sslmode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/app?sslmode=require&application_name=api")
    assert db.database_url() == "postgresql://u:p@host:5432/app?application_name=api"
    assert db.database_sslmode() == "require"


def test_database_url_without_query(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/app")
    assert db.database_url() == "postgresql://u:p@host/app"
    assert db.database_sslmode() is None


def test_database_url_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        db.database_url()


def test_env_int_falls_back_on_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "lots")
    assert db._env_int("DB_POOL_MAX_SIZE", 5) == 5
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "12")
    assert db._env_int("DB_POOL_MAX_SIZE", 5) == 12


@pytest.mark.parametrize(
    ("status", "expected"),
    [("UPDATE 1", 1), ("DELETE 0", 0), ("INSERT 0 3", 3), ("", 0), ("SELECT", 0)],
)
def test_affected_rows(status: str, expected: int) -> None:
    assert db.affected_rows(status) == expected


def test_pool_must_be_initialized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(db, "_pool", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        db.pool()


class _RefusingPool:
    async def fetchrow(self, *_):
        raise ConnectionRefusedError("connection refused")

    async def fetch(self, *_):
        raise ConnectionRefusedError("connection refused")

    async def execute(self, *_):
        raise ConnectionRefusedError("connection refused")


@pytest.mark.asyncio
async def test_connection_failures_become_store_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(db, "_pool", _RefusingPool())
    with pytest.raises(db.StoreError):
        await db.fetch_one("SELECT 1")
    with pytest.raises(db.StoreError):
        await db.fetch_all("SELECT 1")
    with pytest.raises(db.StoreError):
        await db.execute("SELECT 1")
