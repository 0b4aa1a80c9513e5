"""Endpoints for pets."""

from uuid import UUID

from fastapi import APIRouter, status

from pettrack.api.dependencies import PetRepoDep
from pettrack.models.pet import PetCreate, PetOut, PetUpdate
from pettrack.services import pet_service

router = APIRouter(prefix="/api/pets", tags=["pets"])


@router.post("", response_model=PetOut, status_code=status.HTTP_201_CREATED)
async def create_pet(payload: PetCreate, pets: PetRepoDep) -> PetOut:
    """Register a new pet."""
    return await pet_service.create_pet(pets, payload)


@router.get("/{pet_id}", response_model=PetOut)
async def get_pet(pet_id: UUID, pets: PetRepoDep) -> PetOut:
    """Return a pet by its identifier."""
    return await pet_service.get_pet(pets, str(pet_id))


@router.patch("/{pet_id}", response_model=PetOut)
async def rename_pet(pet_id: UUID, payload: PetUpdate, pets: PetRepoDep) -> PetOut:
    """Rename a pet."""
    return await pet_service.rename_pet(pets, str(pet_id), payload)
