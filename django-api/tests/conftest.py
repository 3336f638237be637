"""Pytest configuration and shared fixtures."""

from contextlib import contextmanager
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from rest_framework.test import APIClient

from dvc.domain import ContractId, DVCBooking, DVCContract, Resort, UseYear
from dvc.domain.errors import ContractInUseError
from dvc.stores.interfaces import ContractStore

EASTERN = ZoneInfo("America/New_York")


class InMemoryContractStore(ContractStore):
    """Dict-backed store; atomic() restores the previous state on error."""

    def __init__(self) -> None:
        self.contracts: dict[tuple[int, str], DVCContract] = {}
        self.bookings: list[tuple[int, DVCBooking]] = []
        self.locked: list[str] = []

    def list_contracts(self, user_id):
        return [c for (owner, _), c in self.contracts.items() if owner == user_id]

    def get_contract(self, user_id, contract_id, for_update=False):
        if for_update:
            self.locked.append(contract_id.value)
        return self.contracts.get((user_id, contract_id.value))

    def add_contract(self, user_id, contract):
        self.contracts[(user_id, contract.contract_id.value)] = contract
        return contract

    def save_contract(self, user_id, contract):
        key = (user_id, contract.contract_id.value)
        if key not in self.contracts:
            return False
        self.contracts[key] = contract
        return True

    def delete_contract(self, user_id, contract_id):
        key = (user_id, contract_id.value)
        if key not in self.contracts:
            return False
        if any(b.contract_id == contract_id for owner, b in self.bookings if owner == user_id):
            raise ContractInUseError(contract_id.value)
        del self.contracts[key]
        return True

    def record_booking(self, user_id, booking):
        self.bookings.append((user_id, booking))
        return booking

    def list_bookings(self, user_id, contract_id):
        return [b for owner, b in reversed(self.bookings) if owner == user_id and b.contract_id == contract_id]

    @contextmanager
    def atomic(self):
        snapshot = (dict(self.contracts), list(self.bookings))
        try:
            yield
        except Exception:
            self.contracts, self.bookings = snapshot
            raise


def make_contract(
    annual: int = 150,
    banked: int = 0,
    borrowed: int = 0,
    home_resort: Resort = Resort.RIVIERA,
    contract_id: str = "riviera-resort-0001",
) -> DVCContract:
    return DVCContract(
        contract_id=ContractId(contract_id),
        home_resort=home_resort,
        annual_points=annual,
        banked_points=banked,
        borrowed_points=borrowed,
        use_year=UseYear.FEB,
    )


@pytest.fixture
def contract_factory():
    return make_contract


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 15, 0, 0, tzinfo=EASTERN)


@pytest.fixture
def memory_store() -> InMemoryContractStore:
    return InMemoryContractStore()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="mickey", password="ears")


@pytest.fixture
def auth_client(api_client: APIClient, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
