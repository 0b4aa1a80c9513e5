"""Pydantic models for pets."""

from pydantic import BaseModel, Field

from pettrack.domain.pet import NAME_MAX_LENGTH

# Client-facing message per (field, pydantic error type)
ERROR_MESSAGES = {
    "name": {
        "missing": "Pet name is required",
        "string_type": "Pet name must be a string",
        "string_too_short": "Pet name is required",
        "string_too_long": f"Pet name cannot exceed {NAME_MAX_LENGTH} characters",
    },
    "pet_id": {
        "uuid_parsing": "Pet ID must be a valid UUID",
        "uuid_type": "Pet ID must be a valid UUID",
    },
}


class PetCreate(BaseModel):
    """Payload to register a pet."""
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)


class PetUpdate(BaseModel):
    """Payload to rename a pet."""
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)


class PetOut(BaseModel):
    """Pet as returned by the API."""
    id: str
    name: str
