"""Django ORM implementation of the ContractStore."""

from contextlib import AbstractContextManager

from django.db import transaction
from django.db.models import ProtectedError

from dvc import models
from dvc.domain import (
    BookingId,
    BookingWindow,
    ContractId,
    DVCBooking,
    DVCContract,
    Resort,
    UseYear,
)
from dvc.domain.errors import ContractInUseError
from dvc.stores.interfaces import ContractStore


class DjangoContractStore(ContractStore):
    """Database-backed contract store using Django ORM."""

    def list_contracts(self, user_id: int) -> list[DVCContract]:
        rows = models.Contract.objects.filter(owner_id=user_id).order_by("created_at")
        return [_contract_to_domain(row) for row in rows]

    def get_contract(
        self, user_id: int, contract_id: ContractId, for_update: bool = False
    ) -> DVCContract | None:
        queryset = models.Contract.objects.filter(
            owner_id=user_id, contract_id=contract_id.value
        )
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.first()
        return _contract_to_domain(row) if row is not None else None

    def add_contract(self, user_id: int, contract: DVCContract) -> DVCContract:
        row = models.Contract.objects.create(
            contract_id=contract.contract_id.value,
            owner_id=user_id,
            home_resort=contract.home_resort.value,
            annual_points=contract.annual_points,
            banked_points=contract.banked_points,
            borrowed_points=contract.borrowed_points,
            use_year=contract.use_year.value,
        )
        return _contract_to_domain(row)

    def save_contract(self, user_id: int, contract: DVCContract) -> bool:
        row = models.Contract.objects.filter(
            owner_id=user_id, contract_id=contract.contract_id.value
        ).first()
        if row is None:
            return False
        row.home_resort = contract.home_resort.value
        row.annual_points = contract.annual_points
        row.banked_points = contract.banked_points
        row.borrowed_points = contract.borrowed_points
        row.use_year = contract.use_year.value
        # post_save must fire to invalidate the contract list cache.
        row.save()
        return True

    def delete_contract(self, user_id: int, contract_id: ContractId) -> bool:
        row = models.Contract.objects.filter(
            owner_id=user_id, contract_id=contract_id.value
        ).first()
        if row is None:
            return False
        try:
            row.delete()
        except ProtectedError as exc:
            raise ContractInUseError(contract_id.value) from exc
        return True

    def record_booking(self, user_id: int, booking: DVCBooking) -> DVCBooking:
        row = models.Booking.objects.create(
            id=booking.id.value,
            contract_id=booking.contract_id.value,
            resort=booking.resort.value,
            check_in_date=booking.check_in_date,
            points_used=booking.points_used,
            booking_window=booking.booking_window.value,
            reserved_at=booking.reserved_at,
        )
        return _booking_to_domain(row)

    def list_bookings(self, user_id: int, contract_id: ContractId) -> list[DVCBooking]:
        rows = models.Booking.objects.filter(
            contract__owner_id=user_id, contract_id=contract_id.value
        ).order_by("-reserved_at")
        return [_booking_to_domain(row) for row in rows]

    def atomic(self) -> AbstractContextManager[None]:
        return transaction.atomic()


def _contract_to_domain(row: models.Contract) -> DVCContract:
    return DVCContract(
        contract_id=ContractId(row.contract_id),
        home_resort=Resort(row.home_resort),
        annual_points=row.annual_points,
        banked_points=row.banked_points,
        borrowed_points=row.borrowed_points,
        use_year=UseYear(row.use_year),
    )


def _booking_to_domain(row: models.Booking) -> DVCBooking:
    return DVCBooking(
        id=BookingId(row.id),
        contract_id=ContractId(row.contract_id),
        resort=Resort(row.resort),
        check_in_date=row.check_in_date,
        points_used=row.points_used,
        booking_window=BookingWindow(row.booking_window),
        reserved_at=row.reserved_at,
    )
