"""Shared fixtures: in-memory SQLite via aiosqlite and in-memory repositories."""

import aiosqlite
import pytest
import pytest_asyncio

from pettrack.repositories.memory import InMemoryPetRepository, InMemoryWeightRepository
from pettrack.services.database import init_schema


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory SQLite connection with the application schema."""
    async with aiosqlite.connect(":memory:") as conn:
        conn.row_factory = aiosqlite.Row
        await init_schema(conn)
        yield conn


@pytest.fixture
def pets():
    return InMemoryPetRepository()


@pytest.fixture
def weights():
    return InMemoryWeightRepository()
