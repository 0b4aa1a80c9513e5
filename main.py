"""PetTrack API application entry point."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()  # load .env before anything reads os.getenv()

from fastapi import FastAPI

from pettrack import __version__
from pettrack.api.errors import register_exception_handlers
from pettrack.api.routes import health_router, pets_router, weights_router
from pettrack.services.database import DATABASE_URL, create_tables

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database schema at startup."""
    await create_tables()
    logger.info("SQLite database ready at %s", DATABASE_URL)

    yield

    logger.info("PetTrack API stopped")


app = FastAPI(
    title="PetTrack API",
    description="Track pets and their weight measurements over time.",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(health_router)
app.include_router(pets_router)
app.include_router(weights_router)
