from .memory import InMemoryPetRepository, InMemoryWeightRepository
from .sqlite import SqlitePetRepository, SqliteWeightRepository

__all__ = [
    "InMemoryPetRepository", "InMemoryWeightRepository",
    "SqlitePetRepository", "SqliteWeightRepository",
]
