from .errors import DomainError, NotFoundError, ValidationError
from .pet import Pet
from .repositories import PetRepository, WeightRepository
from .weight import Weight

__all__ = [
    "DomainError", "NotFoundError", "ValidationError",
    "Pet", "Weight",
    "PetRepository", "WeightRepository",
]
