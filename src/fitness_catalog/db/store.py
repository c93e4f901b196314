"""Store client used by the rule engine.

Table and column names passed to these methods come from the entity
configuration table, never from request payloads.
"""

from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

import aiosqlite

from .engine import get_db_path


def _quote(identifier: str) -> str:
    return f'"{identifier}"'


def _adapt(value: Any) -> Any:
    """Convert Python values to what SQLite stores."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, bool):
        return int(value)
    return value


def _placeholders(count: int) -> str:
    return ", ".join("?" for _ in range(count))


class StoreSession:
    """Queries and mutations over one open connection."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def find_by_name(
        self,
        table: str,
        name: str,
        case_insensitive: bool = False,
        exclude_id: int | None = None,
    ) -> aiosqlite.Row | None:
        """Find an active row with the given name."""
        match = "lower(name) = lower(?)" if case_insensitive else "name = ?"
        sql = f"SELECT * FROM {_quote(table)} WHERE {match} AND is_deleted = 0"
        params: list[Any] = [name]
        if exclude_id is not None:
            sql += " AND id != ?"
            params.append(exclude_id)
        cursor = await self.db.execute(sql + " LIMIT 1", params)
        return await cursor.fetchone()

    async def count_active(self, table: str) -> int:
        cursor = await self.db.execute(
            f"SELECT COUNT(*) FROM {_quote(table)} WHERE is_deleted = 0"
        )
        row = await cursor.fetchone()
        return row[0]

    async def list_active(self, table: str, offset: int, limit: int) -> list[aiosqlite.Row]:
        """List one page of active rows, oldest first."""
        cursor = await self.db.execute(
            f"SELECT * FROM {_quote(table)} WHERE is_deleted = 0 "
            "ORDER BY id LIMIT ? OFFSET ?",
            (limit, offset),
        )
        return list(await cursor.fetchall())

    async def get_active(self, table: str, row_id: int) -> aiosqlite.Row | None:
        cursor = await self.db.execute(
            f"SELECT * FROM {_quote(table)} WHERE id = ? AND is_deleted = 0",
            (row_id,),
        )
        return await cursor.fetchone()

    async def get_active_many(self, table: str, ids: Iterable[int]) -> list[aiosqlite.Row]:
        """Get the active rows among the given ids."""
        ids = list(ids)
        if not ids:
            return []
        cursor = await self.db.execute(
            f"SELECT * FROM {_quote(table)} "
            f"WHERE id IN ({_placeholders(len(ids))}) AND is_deleted = 0 ORDER BY id",
            ids,
        )
        return list(await cursor.fetchall())

    async def insert(self, table: str, values: dict[str, Any]) -> int:
        """Insert a row and return its id."""
        now = datetime.now().isoformat()
        values = {**values, "created_at": now, "updated_at": now}
        columns = ", ".join(_quote(c) for c in values)
        cursor = await self.db.execute(
            f"INSERT INTO {_quote(table)} ({columns}) VALUES ({_placeholders(len(values))})",
            [_adapt(v) for v in values.values()],
        )
        return cursor.lastrowid

    async def update(self, table: str, row_id: int, values: dict[str, Any]) -> None:
        """Update columns of a row and stamp updated_at."""
        values = {**values, "updated_at": datetime.now().isoformat()}
        assignments = ", ".join(f"{_quote(c)} = ?" for c in values)
        await self.db.execute(
            f"UPDATE {_quote(table)} SET {assignments} WHERE id = ?",
            [*(_adapt(v) for v in values.values()), row_id],
        )

    async def linked_rows(
        self,
        join_table: str,
        owner_column: str,
        target_column: str,
        target_table: str,
        owner_id: int,
    ) -> list[aiosqlite.Row]:
        """Get the active rows linked to an owner through a join table."""
        cursor = await self.db.execute(
            f"""
            SELECT t.* FROM {_quote(target_table)} t
            JOIN {_quote(join_table)} j ON j.{_quote(target_column)} = t.id
            WHERE j.{_quote(owner_column)} = ? AND t.is_deleted = 0
            ORDER BY t.id
            """,
            (owner_id,),
        )
        return list(await cursor.fetchall())

    async def replace_links(
        self,
        join_table: str,
        owner_column: str,
        target_column: str,
        owner_id: int,
        target_ids: Iterable[int],
    ) -> None:
        """Replace every link of an owner with the given target ids."""
        await self.db.execute(
            f"DELETE FROM {_quote(join_table)} WHERE {_quote(owner_column)} = ?",
            (owner_id,),
        )
        await self.db.executemany(
            f"INSERT OR IGNORE INTO {_quote(join_table)} "
            f"({_quote(owner_column)}, {_quote(target_column)}) VALUES (?, ?)",
            [(owner_id, target_id) for target_id in target_ids],
        )

    async def child_rows(
        self, table: str, parent_column: str, parent_id: int, order_by: str
    ) -> list[aiosqlite.Row]:
        cursor = await self.db.execute(
            f"SELECT * FROM {_quote(table)} "
            f"WHERE {_quote(parent_column)} = ? AND is_deleted = 0 "
            f"ORDER BY {_quote(order_by)}",
            (parent_id,),
        )
        return list(await cursor.fetchall())

    async def active_ids_referencing(self, table: str, column: str, target_id: int) -> list[int]:
        """Ids of active rows whose column points at target_id."""
        cursor = await self.db.execute(
            f"SELECT id FROM {_quote(table)} "
            f"WHERE {_quote(column)} = ? AND is_deleted = 0 ORDER BY id",
            (target_id,),
        )
        return [row[0] for row in await cursor.fetchall()]

    async def active_ids_linked(
        self,
        table: str,
        join_table: str,
        owner_column: str,
        target_column: str,
        target_id: int,
    ) -> list[int]:
        """Ids of active rows linked to target_id through a join table."""
        cursor = await self.db.execute(
            f"""
            SELECT t.id FROM {_quote(table)} t
            JOIN {_quote(join_table)} j ON j.{_quote(owner_column)} = t.id
            WHERE j.{_quote(target_column)} = ? AND t.is_deleted = 0
            ORDER BY t.id
            """,
            (target_id,),
        )
        return [row[0] for row in await cursor.fetchall()]

    async def soft_delete_where(self, table: str, column: str, value: int) -> int:
        """Flag every active row matching column = value as deleted."""
        cursor = await self.db.execute(
            f"UPDATE {_quote(table)} SET is_deleted = 1, updated_at = ? "
            f"WHERE {_quote(column)} = ? AND is_deleted = 0",
            (datetime.now().isoformat(), value),
        )
        return cursor.rowcount


class EntityStore:
    """Client for the catalog database.

    Read sessions run in autocommit mode. Write sessions hold a
    BEGIN IMMEDIATE transaction for their whole body, so validation
    reads and the writes that depend on them commit together.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    @asynccontextmanager
    async def session(self, write: bool = False) -> AsyncIterator[StoreSession]:
        """Open a session; write sessions commit on success and roll back on error."""
        async with aiosqlite.connect(self.db_path, isolation_level=None) as db:
            db.row_factory = aiosqlite.Row
            await db.execute("PRAGMA foreign_keys = ON")
            if not write:
                yield StoreSession(db)
                return

            await db.execute("BEGIN IMMEDIATE")
            try:
                yield StoreSession(db)
            except BaseException:
                await db.execute("ROLLBACK")
                raise
            await db.execute("COMMIT")
