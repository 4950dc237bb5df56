"""Async Data Access Layer for the ARTWORK table.

Provides ArtworkDAL with the async operations the trigger pipeline needs,
compatible with `utils.database_init.AsyncDatabaseInitializer`.
"""

from __future__ import annotations

import time
import uuid
from typing import List, Optional, Sequence

from models.artwork_record import ArtworkRecord
from utils.database_init import AsyncDatabaseInitializer


class ArtworkDAL:
    """Data access layer for ARTWORK records.

    The constructor accepts an `AsyncDatabaseInitializer` (or any object
    exposing an async `connection()` context manager that yields an
    `aiosqlite.Connection`).
    """

    _COLUMNS = ("id", "image_url", "detect_art", "created_at")
    _COLUMN_LIST = ", ".join(_COLUMNS)

    def __init__(self, db_initializer: AsyncDatabaseInitializer) -> None:
        self._db = db_initializer

    async def create_artwork(self, record: ArtworkRecord) -> str:
        """Insert a new ARTWORK row and return its id.

        Args:
            record: ArtworkRecord to insert. A UUID hex id is generated when
                `record.id` is None.

        Returns:
            The string primary key of the created row.
        """
        artwork_id = record.id or uuid.uuid4().hex
        created_at = record.created_at or int(time.time())
        detect_art = None if record.detect_art is None else int(record.detect_art)

        async with self._db.connection() as conn:
            await conn.execute(
                f"INSERT INTO ARTWORK ({self._COLUMN_LIST}) VALUES (?, ?, ?, ?)",
                (artwork_id, record.image_url, detect_art, created_at),
            )
            await conn.commit()
        return artwork_id

    async def get_artwork_by_id(self, artwork_id: str) -> Optional[ArtworkRecord]:
        """Return ArtworkRecord for `artwork_id`, or None if not found."""
        async with self._db.connection() as conn:
            cur = await conn.execute(
                f"SELECT {self._COLUMN_LIST} FROM ARTWORK WHERE id = ?",
                (artwork_id,),
            )
            row = await cur.fetchone()
            return self._row_to_record(row) if row else None

    async def list_artworks(self, limit: int = 100, offset: int = 0) -> List[ArtworkRecord]:
        """List ARTWORK rows, newest first."""
        async with self._db.connection() as conn:
            cur = await conn.execute(
                f"SELECT {self._COLUMN_LIST} FROM ARTWORK ORDER BY created_at DESC LIMIT ? OFFSET ?",
                (limit, offset),
            )
            rows = await cur.fetchall()
            return [self._row_to_record(r) for r in rows]

    async def set_detect_art(self, artwork_id: str) -> bool:
        """Mark the record as approved art. Returns True if a row matched.

        Only ever writes true; there is no read-before-write and the last
        writer wins.
        """
        async with self._db.connection() as conn:
            cur = await conn.execute(
                "UPDATE ARTWORK SET detect_art = 1 WHERE id = ?",
                (artwork_id,),
            )
            await conn.commit()
            return cur.rowcount > 0

    @staticmethod
    def _row_to_record(row: Sequence[object]) -> ArtworkRecord:
        """Convert a DB row tuple into an ArtworkRecord."""
        return ArtworkRecord(
            id=row[0],
            image_url=row[1],
            detect_art=None if row[2] is None else bool(row[2]),
            created_at=row[3],
        )
