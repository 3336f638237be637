"""Points ledger: balance computation and deduction for a DVC contract.

Points are consumed in a fixed order: banked first, then annual, and any
remainder is borrowed from the next use-year.
"""

from dataclasses import replace

from dvc.domain.errors import InsufficientPointsError, InvalidContractStateError
from dvc.domain.models import DVCContract, SufficiencyCheck


def get_available_points(contract: DVCContract) -> int:
    """Return annual + banked - borrowed points."""
    _require_contract(contract)
    return contract.available_points


def validate_sufficiency(contract: DVCContract, points_required: int) -> SufficiencyCheck:
    """Check whether the contract can cover points_required without borrowing."""
    available = get_available_points(contract)
    return SufficiencyCheck(sufficient=points_required <= available, available=available)


def deduct(contract: DVCContract, points_to_deduct: int) -> DVCContract:
    """Apply a deduction and return the updated contract.

    This does not check sufficiency. Once banked and annual points run out,
    the remainder is added to borrowed_points with no upper bound. Use
    deduct_safe to reject deductions the balance cannot cover.

    Raises:
        InvalidContractStateError: If points_to_deduct is negative or contract is None.
    """
    _require_contract(contract)
    if points_to_deduct < 0:
        raise InvalidContractStateError("points_to_deduct cannot be negative")

    remaining = points_to_deduct

    banked_taken = min(contract.banked_points, remaining)
    remaining -= banked_taken

    annual_taken = min(contract.annual_points, remaining)
    remaining -= annual_taken

    return replace(
        contract,
        banked_points=contract.banked_points - banked_taken,
        annual_points=contract.annual_points - annual_taken,
        borrowed_points=contract.borrowed_points + remaining,
    )


def deduct_safe(contract: DVCContract, points_to_deduct: int) -> DVCContract:
    """Like deduct, but refuses amounts larger than the available balance.

    Raises:
        InsufficientPointsError: If points_to_deduct exceeds available points.
        InvalidContractStateError: If points_to_deduct is negative or contract is None.
    """
    check = validate_sufficiency(contract, points_to_deduct)
    if not check.sufficient:
        raise InsufficientPointsError(points_to_deduct, check.available)
    return deduct(contract, points_to_deduct)


def _require_contract(contract: DVCContract | None) -> None:
    if contract is None:
        raise InvalidContractStateError("contract is required")
