"""SQLite initialization and async connection management via aiosqlite."""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import aiosqlite

DATABASE_URL = os.getenv("DATABASE_URL", "data/pettrack.db")

__all__ = ["DATABASE_URL", "create_tables", "get_db", "init_schema"]

_CREATE_PETS = """
CREATE TABLE IF NOT EXISTS pets (
    id          TEXT         PRIMARY KEY,
    name        VARCHAR(255) NOT NULL,
    created_at  TEXT         NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_WEIGHTS = """
CREATE TABLE IF NOT EXISTS weights (
    id          TEXT    PRIMARY KEY,
    pet_id      TEXT    NOT NULL REFERENCES pets(id) ON DELETE CASCADE,
    weight      REAL    NOT NULL CHECK(weight > 0),
    date        TEXT    NOT NULL,
    created_at  TEXT    NOT NULL DEFAULT (datetime('now'))
)
"""

_CREATE_WEIGHTS_INDEX = """
CREATE INDEX IF NOT EXISTS ix_weights_pet_id_date ON weights (pet_id, date)
"""


async def create_tables(db_url: str = DATABASE_URL) -> None:
    """Create all application tables if they don't exist."""
    if db_url != ":memory:":
        os.makedirs(os.path.dirname(db_url) or ".", exist_ok=True)
    async with aiosqlite.connect(db_url) as db:
        await init_schema(db)


async def init_schema(db: aiosqlite.Connection) -> None:
    """Create tables and indexes on an open connection."""
    await db.execute("PRAGMA foreign_keys = ON")
    await db.execute(_CREATE_PETS)
    await db.execute(_CREATE_WEIGHTS)
    await db.execute(_CREATE_WEIGHTS_INDEX)
    await db.commit()


@asynccontextmanager
async def get_db(db_url: str = DATABASE_URL) -> AsyncGenerator[aiosqlite.Connection, None]:
    """Context manager that provides a SQLite connection with foreign keys enabled."""
    async with aiosqlite.connect(db_url) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db
