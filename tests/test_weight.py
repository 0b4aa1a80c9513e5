"""Unit tests for the Weight entity."""

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from pettrack.domain import weight as weight_module
from pettrack.domain.errors import DomainError
from pettrack.domain.weight import Weight

WEIGHT_ID = "0190a6d2-3c1e-7b4a-9f00-000000000001"
PET_ID = "0190a6d2-3c1e-7b4a-9f00-1234567890ab"
TODAY = date(2024, 6, 1)


@pytest.fixture(autouse=True)
def fixed_today(monkeypatch):
    monkeypatch.setattr(weight_module, "utc_today", lambda: TODAY)


def test_valid_weight_round_trips():
    w = Weight(WEIGHT_ID, PET_ID, 25.5, date(2023, 11, 20))
    assert w.id == WEIGHT_ID
    assert w.pet_id == PET_ID
    assert w.weight == 25.5
    assert w.date == date(2023, 11, 20)


@pytest.mark.parametrize("value", [0.01, 1, 999.99, 1000])
def test_weight_bounds_accepted(value):
    assert Weight(WEIGHT_ID, PET_ID, value, TODAY).weight == value


@pytest.mark.parametrize("value", [0, -0.0, -5])
def test_non_positive_weight_rejected(value):
    with pytest.raises(DomainError, match="Weight must be greater than 0"):
        Weight(WEIGHT_ID, PET_ID, value, TODAY)


@pytest.mark.parametrize(
    "value, message",
    [
        (math.nan, "Weight must be greater than 0"),
        (-math.inf, "Weight must be greater than 0"),
        (math.inf, "Weight cannot exceed 1000 kg"),
    ],
)
def test_non_finite_weight_rejected(value, message):
    with pytest.raises(DomainError, match=message):
        Weight(WEIGHT_ID, PET_ID, value, TODAY)


def test_nan_update_rejected():
    w = Weight(WEIGHT_ID, PET_ID, 25.5, TODAY)
    with pytest.raises(DomainError, match="greater than 0"):
        w.weight = math.nan
    assert w.weight == 25.5


def test_weight_above_1000_rejected():
    with pytest.raises(DomainError, match="Weight cannot exceed 1000 kg"):
        Weight(WEIGHT_ID, PET_ID, 1000.01, TODAY)


def test_same_day_accepted():
    assert Weight(WEIGHT_ID, PET_ID, 10, TODAY).date == TODAY


def test_next_day_rejected():
    with pytest.raises(DomainError, match="Weight date cannot be in the future"):
        Weight(WEIGHT_ID, PET_ID, 10, TODAY + timedelta(days=1))


def test_datetime_reduced_to_calendar_date():
    """Time of day is ignored: late today is still today."""
    w = Weight(WEIGHT_ID, PET_ID, 10, datetime(2024, 6, 1, 23, 59))
    assert w.date == TODAY
    assert type(w.date) is date


def test_checks_run_in_order():
    tomorrow = TODAY + timedelta(days=1)
    with pytest.raises(DomainError, match="Weight must be greater than 0"):
        Weight(WEIGHT_ID, PET_ID, -5, tomorrow)
    with pytest.raises(DomainError, match="Weight cannot exceed 1000 kg"):
        Weight(WEIGHT_ID, PET_ID, 5000, tomorrow)


def test_create_generates_id():
    w = Weight.create(PET_ID, 25.5, date(2023, 11, 20))
    assert len(w.id) == 36
    assert w.id != WEIGHT_ID
    assert w.pet_id == PET_ID


def test_create_validates():
    with pytest.raises(DomainError, match="greater than 0"):
        Weight.create(PET_ID, 0, TODAY)


def test_update_weight():
    w = Weight(WEIGHT_ID, PET_ID, 25.5, TODAY)
    w.weight = 30
    assert w.weight == 30


def test_update_date():
    w = Weight(WEIGHT_ID, PET_ID, 25.5, TODAY)
    w.date = date(2024, 1, 1)
    assert w.date == date(2024, 1, 1)


def test_failed_update_leaves_weight_unchanged():
    """Setters validate the candidate state before committing it."""
    w = Weight(WEIGHT_ID, PET_ID, 25.5, date(2024, 1, 1))
    with pytest.raises(DomainError, match="greater than 0"):
        w.weight = -1
    assert w.weight == 25.5
    with pytest.raises(DomainError, match="cannot exceed 1000"):
        w.weight = 1001
    assert w.weight == 25.5
    with pytest.raises(DomainError, match="in the future"):
        w.date = TODAY + timedelta(days=1)
    assert w.date == date(2024, 1, 1)


def test_mutation_uses_fresh_today(monkeypatch):
    """A date valid at construction is checked against the clock at mutation time."""
    w = Weight(WEIGHT_ID, PET_ID, 25.5, TODAY)
    monkeypatch.setattr(weight_module, "utc_today", lambda: TODAY - timedelta(days=1))
    with pytest.raises(DomainError, match="in the future"):
        w.weight = 26
    assert w.weight == 25.5


def test_id_and_pet_id_are_read_only():
    w = Weight(WEIGHT_ID, PET_ID, 25.5, TODAY)
    with pytest.raises(AttributeError):
        w.id = "other"
    with pytest.raises(AttributeError):
        w.pet_id = "other"


def test_offset_datetime_uses_utc_day():
    """02:00 on June 2nd at +05:00 is still June 1st in UTC."""
    local = datetime(2024, 6, 2, 1, 0, tzinfo=timezone(timedelta(hours=5)))
    w = Weight(WEIGHT_ID, PET_ID, 10, local)
    assert w.date == TODAY


def test_offset_datetime_past_utc_midnight_rejected():
    """20:00 on June 1st at -05:00 is already June 2nd in UTC."""
    local = datetime(2024, 6, 1, 20, 0, tzinfo=timezone(timedelta(hours=-5)))
    with pytest.raises(DomainError, match="in the future"):
        Weight(WEIGHT_ID, PET_ID, 10, local)


def test_offset_datetime_update_uses_utc_day():
    w = Weight(WEIGHT_ID, PET_ID, 10, date(2024, 1, 1))
    w.date = datetime(2024, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-2)))
    assert w.date == date(2024, 3, 2)
