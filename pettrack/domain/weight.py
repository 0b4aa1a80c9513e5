"""Weight measurement entity."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Union

from pettrack.domain.errors import DomainError
from pettrack.domain.ids import new_id

MAX_WEIGHT_KG = 1000

Number = Union[int, float]


def utc_today() -> date:
    """Current calendar date in UTC, read at validation time."""
    return datetime.now(timezone.utc).date()


def to_calendar_date(value: date) -> date:
    """Reduce a date or datetime to its calendar date.

    Offset-aware datetimes are converted to UTC first, so the day matches
    the one ``utc_today()`` is compared against.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def _validate(weight: Number, measured_on: date) -> None:
    # NaN fails both checks
    if not weight > 0:
        raise DomainError("Weight must be greater than 0")
    if not weight <= MAX_WEIGHT_KG:
        raise DomainError(f"Weight cannot exceed {MAX_WEIGHT_KG} kg")
    if measured_on > utc_today():
        raise DomainError("Weight date cannot be in the future")


class Weight:
    """A weight measurement (kilograms) taken for a pet on a given day.

    ``id`` and ``pet_id`` are fixed at construction. ``weight`` and ``date``
    can be reassigned; each assignment re-runs the full check against the
    candidate state and only commits it when valid.
    """

    __slots__ = ("_id", "_pet_id", "_weight", "_date")

    def __init__(self, id: str, pet_id: str, weight: Number, date: date) -> None:
        date = to_calendar_date(date)
        _validate(weight, date)
        self._id = id
        self._pet_id = pet_id
        self._weight = weight
        self._date = date

    @classmethod
    def create(cls, pet_id: str, weight: Number, date: date) -> "Weight":
        """Build a new measurement with a freshly generated id."""
        return cls(new_id(), pet_id, weight, date)

    @property
    def id(self) -> str:
        return self._id

    @property
    def pet_id(self) -> str:
        return self._pet_id

    @property
    def weight(self) -> Number:
        return self._weight

    @weight.setter
    def weight(self, value: Number) -> None:
        _validate(value, self._date)
        self._weight = value

    @property
    def date(self) -> date:
        return self._date

    @date.setter
    def date(self, value: date) -> None:
        value = to_calendar_date(value)
        _validate(self._weight, value)
        self._date = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Weight):
            return NotImplemented
        return (self._id, self._pet_id, self._weight, self._date) == (
            other._id, other._pet_id, other._weight, other._date,
        )

    def __repr__(self) -> str:
        return (
            f"Weight(id={self._id!r}, pet_id={self._pet_id!r}, "
            f"weight={self._weight!r}, date={self._date.isoformat()!r})"
        )
