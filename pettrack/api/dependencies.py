"""Reusable FastAPI dependencies (DB connection, repositories)."""

from collections.abc import AsyncGenerator
from typing import Annotated

import aiosqlite
from fastapi import Depends

from pettrack.domain.repositories import PetRepository, WeightRepository
from pettrack.repositories.sqlite import SqlitePetRepository, SqliteWeightRepository
from pettrack.services.database import get_db as _get_db


async def db_dependency() -> AsyncGenerator[aiosqlite.Connection, None]:
    """Provide a SQLite connection for the duration of the request."""
    async with _get_db() as conn:
        yield conn


DbDep = Annotated[aiosqlite.Connection, Depends(db_dependency)]


def pet_repository(db: DbDep) -> PetRepository:
    return SqlitePetRepository(db)


def weight_repository(db: DbDep) -> WeightRepository:
    return SqliteWeightRepository(db)


PetRepoDep = Annotated[PetRepository, Depends(pet_repository)]
WeightRepoDep = Annotated[WeightRepository, Depends(weight_repository)]
