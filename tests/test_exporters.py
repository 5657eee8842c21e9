import asyncio
from typing import Any, List, Tuple

import pytest

from tokenlens.config import InspectorConfig
from tokenlens.exporters import InMemoryExporter, PostgresExporter, create_exporter_from_env
from tokenlens.record import InspectionRecord


class FakeConnection:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    async def execute(self, sql: str, *args: Any) -> str:
        self.calls.append((sql, args))
        return "OK"


class FakeAcquire:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn

    async def __aenter__(self) -> FakeConnection:
        return self.conn

    async def __aexit__(self, *exc: Any) -> bool:
        return False


class FakePool:
    def __init__(self) -> None:
        self.conn = FakeConnection()
        self.closed = False

    def acquire(self) -> FakeAcquire:
        return FakeAcquire(self.conn)

    async def close(self) -> None:
        self.closed = True


def _record() -> InspectionRecord:
    return InspectionRecord(fingerprint="abcd1234abcd1234", algorithm="HS256", status="VALID", is_expired=False)


def test_in_memory_exporter_keeps_records() -> None:
    async def run() -> None:
        exporter = InMemoryExporter()
        record = _record()
        await exporter.export(record)
        await exporter.close()
        assert exporter.records == [record]

    asyncio.run(run())


def test_postgres_exporter_inserts_record_fields() -> None:
    async def run() -> None:
        pool = FakePool()
        exporter = PostgresExporter(pool=pool)
        record = _record()

        await exporter.ensure_schema()
        await exporter.export(record)

        schema_sql, _ = pool.conn.calls[0]
        assert "CREATE TABLE IF NOT EXISTS tokenlens_verifications" in schema_sql
        insert_sql, args = pool.conn.calls[1]
        assert "INSERT INTO tokenlens_verifications" in insert_sql
        assert args == (
            record.record_id,
            "abcd1234abcd1234",
            "HS256",
            "VALID",
            False,
            record.created_at,
        )

        await exporter.close()
        assert pool.closed is True

    asyncio.run(run())


def test_postgres_exporter_requires_dsn_or_pool() -> None:
    async def run() -> None:
        with pytest.raises(ValueError):
            await PostgresExporter().connect()

    asyncio.run(run())


def test_create_exporter_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert create_exporter_from_env(InspectorConfig()) is None
    assert isinstance(create_exporter_from_env(InspectorConfig(postgres_dsn="postgresql://localhost/db")), PostgresExporter)

    monkeypatch.delenv("TOKENLENS_PG_DSN", raising=False)
    monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/fallback")
    assert isinstance(create_exporter_from_env(), PostgresExporter)
