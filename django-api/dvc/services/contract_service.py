"""Contract service - business logic for managing a user's DVC contracts.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from dataclasses import replace

from dvc.domain import ContractId, DVCContract, Resort, UseYear
from dvc.domain.errors import ContractNotFoundError, InvalidContractIdError
from dvc.stores.interfaces import ContractStore

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {"home_resort", "annual_points", "banked_points", "borrowed_points", "use_year"}
)


def parse_contract_id(contract_id: str) -> ContractId:
    """Parse a raw contract ID.

    Raises:
        InvalidContractIdError: If the ID is malformed.
    """
    try:
        return ContractId.from_string(contract_id)
    except (ValueError, AttributeError) as exc:
        raise InvalidContractIdError() from exc


class ContractService:
    """Service for DVC contract operations."""

    def __init__(self, store: ContractStore) -> None:
        self._store = store

    def list_contracts(self, user_id: int) -> list[DVCContract]:
        """Return all of the user's contracts."""
        return self._store.list_contracts(user_id)

    def get_contract(self, user_id: int, contract_id: str) -> DVCContract:
        """Return a contract by ID.

        Raises:
            InvalidContractIdError: If the contract_id is malformed.
            ContractNotFoundError: If the user has no such contract.
        """
        contract = self._store.get_contract(user_id, parse_contract_id(contract_id))
        if contract is None:
            raise ContractNotFoundError(contract_id)
        return contract

    def add_contract(
        self,
        user_id: int,
        home_resort: Resort,
        annual_points: int,
        use_year: UseYear,
        banked_points: int = 0,
        borrowed_points: int = 0,
    ) -> DVCContract:
        """Create a new contract with no points used yet.

        Raises:
            InvalidContractStateError: If any bucket is negative.
        """
        contract = DVCContract(
            contract_id=ContractId.generate(home_resort),
            home_resort=home_resort,
            annual_points=annual_points,
            banked_points=banked_points,
            borrowed_points=borrowed_points,
            use_year=use_year,
        )
        created = self._store.add_contract(user_id, contract)
        logger.info(
            "Added DVC contract %s for user %s (%s points available)",
            created.contract_id,
            user_id,
            created.available_points,
        )
        return created

    def update_contract(
        self, user_id: int, contract_id: str, changes: Mapping[str, object]
    ) -> DVCContract:
        """Apply changes to a contract's resort, use-year or point buckets.

        Keys outside UPDATABLE_FIELDS are ignored.

        Raises:
            InvalidContractIdError: If the contract_id is malformed.
            ContractNotFoundError: If the user has no such contract.
            InvalidContractStateError: If a bucket would become negative.
        """
        current = self.get_contract(user_id, contract_id)
        updated = replace(
            current, **{key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        )
        if not self._store.save_contract(user_id, updated):
            raise ContractNotFoundError(contract_id)
        logger.info("Updated DVC contract %s for user %s", updated.contract_id, user_id)
        return updated

    def delete_contract(self, user_id: int, contract_id: str) -> None:
        """Delete a contract.

        Raises:
            InvalidContractIdError: If the contract_id is malformed.
            ContractNotFoundError: If the user has no such contract.
            ContractInUseError: If bookings still reference the contract.
        """
        if not self._store.delete_contract(user_id, parse_contract_id(contract_id)):
            raise ContractNotFoundError(contract_id)
        logger.info("Deleted DVC contract %s for user %s", contract_id, user_id)
