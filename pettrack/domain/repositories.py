"""Persistence ports consumed by the use cases."""

from abc import ABC, abstractmethod
from typing import Optional

from pettrack.domain.pet import Pet
from pettrack.domain.weight import Weight


class PetRepository(ABC):
    """Port for pet persistence.

    Contract:
    - find_by_id() returns None if the pet does not exist (no exception)
    - save() performs upsert and returns the stored pet
    """

    @abstractmethod
    async def find_by_id(self, pet_id: str) -> Optional[Pet]:
        """Return the pet with this id, or None."""

    @abstractmethod
    async def save(self, pet: Pet) -> Pet:
        """Insert or update a pet and return it as stored."""


class WeightRepository(ABC):
    """Port for weight persistence."""

    @abstractmethod
    async def find_by_pet_id(self, pet_id: str) -> list[Weight]:
        """Return all measurements for a pet, most recent date first.

        Measurements sharing a date keep insertion order.
        """

    @abstractmethod
    async def save(self, weight: Weight) -> Weight:
        """Insert or update a measurement and return it as stored."""
