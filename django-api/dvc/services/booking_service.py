"""Booking service - validates and commits DVC point reservations."""

import logging
from datetime import datetime

from dvc.domain import (
    BookingConfirmation,
    BookingId,
    BookingRequest,
    DVCBooking,
    ValidationResult,
    booking_window,
    ledger,
)
from dvc.domain.errors import BookingRejectedError, ContractNotFoundError
from dvc.services.contract_service import parse_contract_id
from dvc.stores.interfaces import ContractStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for validating and committing bookings against a contract."""

    def __init__(self, store: ContractStore) -> None:
        self._store = store

    def validate_booking(
        self, user_id: int, contract_id: str, request: BookingRequest, now: datetime
    ) -> ValidationResult:
        """Check a booking request without changing the contract.

        Rule rejections come back as an invalid ValidationResult.

        Raises:
            InvalidContractIdError: If the contract_id is malformed.
            ContractNotFoundError: If the user has no such contract.
        """
        contract = self._store.get_contract(user_id, parse_contract_id(contract_id))
        if contract is None:
            raise ContractNotFoundError(contract_id)
        result = booking_window.validate(contract, request, now)
        logger.info(
            "Validated booking on contract %s: %s", contract_id, result.outcome.value
        )
        return result

    def book(
        self, user_id: int, contract_id: str, request: BookingRequest, now: datetime
    ) -> BookingConfirmation:
        """Validate the request and, if allowed, deduct points and record the booking.

        The contract is read under a row lock so concurrent bookings cannot
        both deduct from a stale balance.

        Raises:
            InvalidContractIdError: If the contract_id is malformed.
            ContractNotFoundError: If the user has no such contract.
            BookingRejectedError: If the booking rules reject the request.
        """
        parsed_id = parse_contract_id(contract_id)
        with self._store.atomic():
            contract = self._store.get_contract(user_id, parsed_id, for_update=True)
            if contract is None:
                raise ContractNotFoundError(contract_id)

            result = booking_window.validate(contract, request, now)
            if not result.valid:
                logger.info(
                    "Rejected booking on contract %s: %s",
                    contract_id,
                    result.outcome.value,
                )
                raise BookingRejectedError(result)

            updated = ledger.deduct_safe(contract, request.points_required)
            if not self._store.save_contract(user_id, updated):
                raise ContractNotFoundError(contract_id)

            booking = self._store.record_booking(
                user_id,
                DVCBooking(
                    id=BookingId.generate(),
                    contract_id=parsed_id,
                    resort=request.resort,
                    check_in_date=request.check_in_date,
                    points_used=request.points_required,
                    booking_window=result.booking_window,
                    reserved_at=now,
                ),
            )

        logger.info(
            "Booked %s points on contract %s for %s (%s window), %s points left",
            request.points_required,
            contract_id,
            request.check_in_date.isoformat(),
            booking.booking_window.value,
            updated.available_points,
        )
        return BookingConfirmation(booking=booking, contract=updated)

    def list_bookings(self, user_id: int, contract_id: str) -> list[DVCBooking]:
        """Return bookings made against a contract.

        Raises:
            InvalidContractIdError: If the contract_id is malformed.
            ContractNotFoundError: If the user has no such contract.
        """
        parsed_id = parse_contract_id(contract_id)
        if self._store.get_contract(user_id, parsed_id) is None:
            raise ContractNotFoundError(contract_id)
        return self._store.list_bookings(user_id, parsed_id)
