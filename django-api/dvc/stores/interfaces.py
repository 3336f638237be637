"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from dvc.domain import ContractId, DVCBooking, DVCContract


class ContractStore(ABC):
    """Interface for DVC contract and booking persistence operations."""

    @abstractmethod
    def list_contracts(self, user_id: int) -> list[DVCContract]:
        """Return the user's contracts ordered by creation time."""
        ...

    @abstractmethod
    def get_contract(
        self, user_id: int, contract_id: ContractId, for_update: bool = False
    ) -> DVCContract | None:
        """Return a contract by ID, or None if the user has no such contract.

        With for_update, the row stays locked until the enclosing atomic() block ends.
        """
        ...

    @abstractmethod
    def add_contract(self, user_id: int, contract: DVCContract) -> DVCContract:
        """Persist a new contract for the user."""
        ...

    @abstractmethod
    def save_contract(self, user_id: int, contract: DVCContract) -> bool:
        """Overwrite an existing contract's buckets. Return False if it does not exist."""
        ...

    @abstractmethod
    def delete_contract(self, user_id: int, contract_id: ContractId) -> bool:
        """Delete a contract. Return False if it does not exist.

        Raises:
            ContractInUseError: If bookings still reference the contract.
        """
        ...

    @abstractmethod
    def record_booking(self, user_id: int, booking: DVCBooking) -> DVCBooking:
        """Persist a committed booking."""
        ...

    @abstractmethod
    def list_bookings(self, user_id: int, contract_id: ContractId) -> list[DVCBooking]:
        """Return bookings for a contract, most recent first."""
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Return a context manager that commits or rolls back as one unit."""
        ...
