"""Use cases for pets."""

import logging

from pettrack.domain.errors import NotFoundError
from pettrack.domain.pet import Pet
from pettrack.domain.repositories import PetRepository
from pettrack.models.pet import PetCreate, PetOut, PetUpdate

logger = logging.getLogger(__name__)


def _to_output(pet: Pet) -> PetOut:
    return PetOut(id=pet.id, name=pet.name)


async def create_pet(pets: PetRepository, payload: PetCreate) -> PetOut:
    """Register a new pet. Raises DomainError if the name is invalid."""
    pet = Pet.create(payload.name)
    saved = await pets.save(pet)
    logger.info("Pet %s created", saved.id)
    return _to_output(saved)


async def get_pet(pets: PetRepository, pet_id: str) -> PetOut:
    """Return a pet by id, or raise NotFoundError."""
    pet = await pets.find_by_id(pet_id)
    if pet is None:
        raise NotFoundError("Pet", pet_id)
    return _to_output(pet)


async def rename_pet(pets: PetRepository, pet_id: str, payload: PetUpdate) -> PetOut:
    """Change a pet's name.

    Raises NotFoundError if the pet does not exist and DomainError if the
    new name is invalid; nothing is written in either case.
    """
    pet = await pets.find_by_id(pet_id)
    if pet is None:
        raise NotFoundError("Pet", pet_id)
    pet.name = payload.name
    saved = await pets.save(pet)
    logger.info("Pet %s renamed", saved.id)
    return _to_output(saved)
