"""Domain error codes for the DVC module.

Booking rule rejections are returned as ValidationResult data, not raised.
The errors below cover missing records, malformed input and the commit path.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dvc.domain.models import ValidationResult


class ErrorCode(Enum):
    """Domain error codes."""

    CONTRACT_NOT_FOUND = "CONTRACT_NOT_FOUND"
    CONTRACT_IN_USE = "CONTRACT_IN_USE"
    INVALID_CONTRACT_ID = "INVALID_CONTRACT_ID"
    INVALID_CONTRACT_STATE = "INVALID_CONTRACT_STATE"
    INVALID_BOOKING_REQUEST = "INVALID_BOOKING_REQUEST"
    INSUFFICIENT_POINTS = "INSUFFICIENT_POINTS"
    BOOKING_REJECTED = "BOOKING_REJECTED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ContractNotFoundError(DomainError):
    """Raised when a contract does not exist in the user's contract list."""

    def __init__(self, contract_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONTRACT_NOT_FOUND,
            message="DVC contract not found",
        )
        self.contract_id = contract_id


class ContractInUseError(DomainError):
    """Raised when deleting a contract that bookings still reference."""

    def __init__(self, contract_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONTRACT_IN_USE,
            message="DVC contract has bookings and cannot be deleted",
        )
        self.contract_id = contract_id


class InvalidContractIdError(DomainError):
    """Raised when a contract ID is malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONTRACT_ID,
            message="Invalid contract ID format",
        )


class InvalidContractStateError(DomainError):
    """Raised for negative point buckets, negative deductions or a missing contract."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_CONTRACT_STATE, message=message)


class InvalidBookingRequestError(DomainError):
    """Raised when a booking request is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_BOOKING_REQUEST, message=message)


class InsufficientPointsError(DomainError):
    """Raised by the safe deduction when the contract cannot cover the amount."""

    def __init__(self, points_required: int, points_available: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_POINTS,
            message=(
                f"Insufficient points. Need {points_required}, "
                f"have {points_available}"
            ),
        )
        self.points_required = points_required
        self.points_available = points_available


class BookingRejectedError(DomainError):
    """Raised when committing a booking that the booking rules reject."""

    def __init__(self, result: "ValidationResult") -> None:
        super().__init__(code=ErrorCode.BOOKING_REJECTED, message=result.message)
        self.result = result
