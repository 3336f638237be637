"""Domain models for DVC contracts and bookings.

These are pure domain objects with no API input rules.
Django ORM models are in dvc/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from dvc.domain.errors import InvalidBookingRequestError, InvalidContractStateError
from dvc.domain.value_objects import (
    BookingId,
    BookingWindow,
    ContractId,
    MealType,
    Resort,
    UseYear,
)


@dataclass(frozen=True)
class DVCContract:
    """Domain representation of a DVC contract and its point buckets.

    borrowed_points is a debt against the next use-year, so it is subtracted
    from the usable balance rather than added to it.
    """

    contract_id: ContractId
    home_resort: Resort
    annual_points: int
    banked_points: int
    borrowed_points: int
    use_year: UseYear

    def __post_init__(self) -> None:
        for bucket in ("annual_points", "banked_points", "borrowed_points"):
            if getattr(self, bucket) < 0:
                raise InvalidContractStateError(f"{bucket} cannot be negative")

    @property
    def available_points(self) -> int:
        # Always derived from the buckets, never stored.
        return self.annual_points + self.banked_points - self.borrowed_points


@dataclass(frozen=True)
class BookingRequest:
    """A reservation the user wants to fund with contract points."""

    points_required: int
    check_in_date: date
    resort: Resort

    def __post_init__(self) -> None:
        if self.points_required <= 0:
            raise InvalidBookingRequestError("points_required must be positive")


@dataclass(frozen=True)
class SufficiencyCheck:
    sufficient: bool
    available: int


@dataclass(frozen=True)
class WindowClassification:
    """How far a check-in date is from now, relative to the booking windows."""

    days_until_check_in: int
    is_within_11_months: bool
    is_within_7_months: bool


class ValidationOutcome(Enum):
    INSUFFICIENT_POINTS = "insufficient_points"
    WINDOW_NOT_OPEN = "window_not_open"
    WRONG_RESORT_FOR_WINDOW = "wrong_resort_for_window"
    VALID = "valid"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a booking request against a contract."""

    valid: bool
    outcome: ValidationOutcome
    message: str
    points_required: int | None = None
    points_available: int | None = None
    booking_window: BookingWindow | None = None
    booking_window_opens_at: date | None = None


@dataclass(frozen=True)
class DVCBooking:
    """Domain representation of a committed points reservation."""

    id: BookingId
    contract_id: ContractId
    resort: Resort
    check_in_date: date
    points_used: int
    booking_window: BookingWindow
    reserved_at: datetime


@dataclass(frozen=True)
class BookingConfirmation:
    booking: DVCBooking
    contract: DVCContract


@dataclass(frozen=True)
class PlannedMeal:
    restaurant_id: str
    restaurant_name: str
    time: str = ""


@dataclass(frozen=True)
class PlannedDay:
    """A trip day as seen by the dining alert planner."""

    date: date
    meals: dict[MealType, PlannedMeal]


@dataclass(frozen=True)
class DiningAlert:
    """A reminder to book a restaurant when its reservation window opens."""

    meal_type: MealType
    restaurant_id: str
    restaurant_name: str
    meal_date: date
    trigger_at: datetime
