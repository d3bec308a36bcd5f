"""Session cache implementations of the SessionCache protocol."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

SCHEMA = """
CREATE TABLE IF NOT EXISTS session_cache (
    session_id TEXT NOT NULL,
    key TEXT NOT NULL,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now')),
    PRIMARY KEY (session_id, key)
);
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLiteSessionCache:
    """SQLite-backed session cache.

    Entries are namespaced by ``session_id`` so that several sessions can
    share one database file without seeing each other's values.
    """

    def __init__(self, db_path: str, session_id: str = "default") -> None:
        self._db_path = db_path
        self._session_id = session_id
        self._db: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        self._db = await aiosqlite.connect(self._db_path)
        self._db.row_factory = aiosqlite.Row
        await self._db.executescript(SCHEMA)
        await self._db.commit()

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    @property
    def db(self) -> aiosqlite.Connection:
        assert self._db is not None, "Cache not initialized. Call initialize() first."
        return self._db

    async def set_item(self, key: str, value: str) -> None:
        await self.db.execute(
            "INSERT INTO session_cache (session_id, key, value, updated_at)"
            " VALUES (?, ?, ?, ?)"
            " ON CONFLICT(session_id, key) DO UPDATE SET"
            " value=excluded.value, updated_at=excluded.updated_at",
            (self._session_id, key, value, _now()),
        )
        await self.db.commit()

    async def get_item(self, key: str) -> str | None:
        async with self.db.execute(
            "SELECT value FROM session_cache WHERE session_id=? AND key=?",
            (self._session_id, key),
        ) as cur:
            row = await cur.fetchone()
            return row["value"] if row else None

    async def remove_item(self, key: str) -> None:
        await self.db.execute(
            "DELETE FROM session_cache WHERE session_id=? AND key=?",
            (self._session_id, key),
        )
        await self.db.commit()


class MemorySessionCache:
    """Dict-backed session cache, lives as long as the process."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
