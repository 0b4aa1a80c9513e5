"""Pydantic models for weight measurements."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pettrack.domain.weight import MAX_WEIGHT_KG

ERROR_MESSAGES = {
    "weight": {
        "missing": "Weight must be a number",
        "float_type": "Weight must be a number",
        "float_parsing": "Weight must be a number",
        "finite_number": "Weight must be a number",
        "greater_than_equal": "Weight must be greater than 0",
        "less_than_equal": f"Weight cannot exceed {MAX_WEIGHT_KG} kg",
    },
    "date": {
        "missing": "Date must be a valid date string",
        "string_type": "Date must be a valid date string",
        "value_error": "Date must be a valid date string",
    },
}


class WeightCreate(BaseModel):
    """Payload to record a weight measurement (kilograms)."""
    # strict: numeric strings such as "25.5" are rejected
    weight: float = Field(..., strict=True, ge=0.01, le=MAX_WEIGHT_KG, description="Weight in kg")
    date: str = Field(..., description="Measurement date (YYYY-MM-DD)")

    @field_validator("date")
    @classmethod
    def _check_date_string(cls, value: str) -> str:
        try:
            datetime.fromisoformat(value)
        except ValueError:
            raise ValueError("not an ISO 8601 date") from None
        return value


class WeightOut(BaseModel):
    """Weight measurement as returned by the API."""
    id: str
    pet_id: str = Field(..., alias="petId")
    weight: float
    date: str

    model_config = ConfigDict(populate_by_name=True)
