"""In-memory repositories, used as test doubles and for running without a database."""

import copy
from typing import Optional

from pettrack.domain.pet import Pet
from pettrack.domain.repositories import PetRepository, WeightRepository
from pettrack.domain.weight import Weight


class InMemoryPetRepository(PetRepository):
    """Dict-backed pet store.

    Entities are copied on the way in and out, so mutating a returned pet
    without calling save() never changes stored state.
    """

    def __init__(self) -> None:
        self._pets: dict[str, Pet] = {}

    async def find_by_id(self, pet_id: str) -> Optional[Pet]:
        pet = self._pets.get(pet_id)
        return copy.deepcopy(pet) if pet is not None else None

    async def save(self, pet: Pet) -> Pet:
        self._pets[pet.id] = copy.deepcopy(pet)
        return copy.deepcopy(pet)


class InMemoryWeightRepository(WeightRepository):
    def __init__(self) -> None:
        # dicts keep insertion order, which breaks ties between equal dates
        self._weights: dict[str, Weight] = {}

    async def find_by_pet_id(self, pet_id: str) -> list[Weight]:
        matches = [w for w in self._weights.values() if w.pet_id == pet_id]
        # sorted() is stable: equal dates stay in insertion order
        matches = sorted(matches, key=lambda w: w.date, reverse=True)
        return [copy.deepcopy(w) for w in matches]

    async def save(self, weight: Weight) -> Weight:
        self._weights[weight.id] = copy.deepcopy(weight)
        return copy.deepcopy(weight)
