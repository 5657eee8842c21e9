"""PostgreSQL exporter for verification audit records."""

from __future__ import annotations

from typing import Optional

import asyncpg

from ..config import InspectorConfig
from ..record import InspectionRecord
from .base import Exporter

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS tokenlens_verifications (
    record_id UUID PRIMARY KEY,
    fingerprint TEXT NOT NULL,
    algorithm TEXT,
    status TEXT NOT NULL,
    is_expired BOOLEAN NOT NULL,
    created_at TIMESTAMPTZ NOT NULL
)
"""

INSERT_SQL = """
INSERT INTO tokenlens_verifications (
    record_id,
    fingerprint,
    algorithm,
    status,
    is_expired,
    created_at
)
VALUES ($1::uuid, $2, $3, $4, $5, $6)
"""


class PostgresExporter(Exporter):
    """Exporter that persists verification records into PostgreSQL using ``asyncpg``."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        *,
        pool: Optional[asyncpg.Pool] = None,
        min_size: int = 1,
        max_size: int = 4,
    ) -> None:
        self._dsn = dsn
        self._pool = pool
        self._min_size = min_size
        self._max_size = max_size

    async def connect(self) -> None:
        """Initialize a connection pool if one was not supplied."""
        if self._pool is not None:
            return
        if not self._dsn:
            raise ValueError("Either `dsn` or `pool` must be provided for PostgresExporter.")

        self._pool = await asyncpg.create_pool(
            dsn=self._dsn,
            min_size=self._min_size,
            max_size=self._max_size,
        )

    async def ensure_schema(self) -> None:
        """Create the audit table when missing."""
        await self.connect()
        assert self._pool is not None
        async with self._pool.acquire() as conn:
            await conn.execute(SCHEMA_SQL)

    async def export(self, record: InspectionRecord) -> None:
        """Insert one verification record."""
        if self._pool is None:
            await self.connect()

        assert self._pool is not None
        row = record.to_dict()

        async with self._pool.acquire() as conn:
            await conn.execute(
                INSERT_SQL,
                row["record_id"],
                row["fingerprint"],
                row["algorithm"],
                row["status"],
                row["is_expired"],
                row["created_at"],
            )

    async def close(self) -> None:
        """Close the underlying pool if it exists."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None


def create_exporter_from_env(config: Optional[InspectorConfig] = None) -> Optional[PostgresExporter]:
    """Create a Postgres exporter if a DSN is configured, otherwise ``None``."""
    dsn = (config or InspectorConfig.from_env()).postgres_dsn
    if dsn:
        return PostgresExporter(dsn=dsn)
    return None
