"""Use cases for weight measurements."""

import logging
from datetime import date, datetime
from typing import Union

from pettrack.domain.errors import NotFoundError, ValidationError
from pettrack.domain.repositories import PetRepository, WeightRepository
from pettrack.domain.weight import Weight, to_calendar_date
from pettrack.models.weight import WeightCreate, WeightOut

logger = logging.getLogger(__name__)


def _parse_date(value: Union[str, date]) -> date:
    """Accept a date, a datetime or an ISO 8601 string; return the calendar date."""
    if isinstance(value, date):
        return to_calendar_date(value)
    try:
        return to_calendar_date(datetime.fromisoformat(value))
    except (TypeError, ValueError):
        raise ValidationError(["Date must be a valid date string"]) from None


def _to_output(weight: Weight) -> WeightOut:
    return WeightOut(
        id=weight.id,
        pet_id=weight.pet_id,
        weight=weight.weight,
        date=weight.date.isoformat(),
    )


async def _require_pet(pets: PetRepository, pet_id: str) -> None:
    if await pets.find_by_id(pet_id) is None:
        raise NotFoundError("Pet", pet_id)


async def create_weight(
    weights: WeightRepository,
    pets: PetRepository,
    pet_id: str,
    payload: WeightCreate,
) -> WeightOut:
    """Record a weight measurement for an existing pet.

    The pet lookup comes first: a missing pet is reported as NotFoundError
    even when the measurement itself would be rejected. Entity checks then
    raise DomainError.
    """
    await _require_pet(pets, pet_id)

    weight = Weight.create(pet_id, payload.weight, _parse_date(payload.date))
    saved = await weights.save(weight)
    logger.info("Weight %s recorded for pet %s", saved.id, pet_id)
    return _to_output(saved)


async def get_weights_by_pet_id(
    weights: WeightRepository,
    pets: PetRepository,
    pet_id: str,
) -> list[WeightOut]:
    """Return a pet's measurements, most recent first. Raises NotFoundError for an unknown pet."""
    await _require_pet(pets, pet_id)
    return [_to_output(w) for w in await weights.find_by_pet_id(pet_id)]
