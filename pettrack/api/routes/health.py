"""Healthcheck endpoint."""

import logging

import aiosqlite
from fastapi import APIRouter
from pydantic import BaseModel

from pettrack.api.dependencies import DbDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    database: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(db: DbDep) -> HealthResponse:
    """Return service status and whether the database answers."""
    try:
        await db.execute("SELECT 1")
        database = True
    except aiosqlite.Error as e:
        logger.warning("Database healthcheck failed: %s", e)
        database = False
    return HealthResponse(status="ok", database=database)
