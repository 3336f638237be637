from dvc.domain.models import (
    BookingConfirmation,
    BookingRequest,
    DiningAlert,
    DVCBooking,
    DVCContract,
    PlannedDay,
    PlannedMeal,
    SufficiencyCheck,
    ValidationOutcome,
    ValidationResult,
    WindowClassification,
)
from dvc.domain.value_objects import (
    BookingId,
    BookingWindow,
    ContractId,
    MealType,
    Resort,
    UseYear,
)

__all__ = [
    "BookingConfirmation",
    "BookingRequest",
    "DiningAlert",
    "DVCBooking",
    "DVCContract",
    "PlannedDay",
    "PlannedMeal",
    "SufficiencyCheck",
    "ValidationOutcome",
    "ValidationResult",
    "WindowClassification",
    "BookingId",
    "BookingWindow",
    "ContractId",
    "MealType",
    "Resort",
    "UseYear",
]
