"""Endpoints for a pet's weight measurements."""

from uuid import UUID

from fastapi import APIRouter, status

from pettrack.api.dependencies import PetRepoDep, WeightRepoDep
from pettrack.models.weight import WeightCreate, WeightOut
from pettrack.services import weight_service

router = APIRouter(prefix="/api/pets/{pet_id}/weights", tags=["weights"])


@router.post("", response_model=WeightOut, status_code=status.HTTP_201_CREATED)
async def add_weight(
    pet_id: UUID, payload: WeightCreate, weights: WeightRepoDep, pets: PetRepoDep
) -> WeightOut:
    """Record a weight measurement (kg) for a pet."""
    return await weight_service.create_weight(weights, pets, str(pet_id), payload)


@router.get("", response_model=list[WeightOut])
async def get_weights(pet_id: UUID, weights: WeightRepoDep, pets: PetRepoDep) -> list[WeightOut]:
    """Return a pet's weight measurements, most recent first."""
    return await weight_service.get_weights_by_pet_id(weights, pets, str(pet_id))
