"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID, uuid4

_CONTRACT_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,119}$")


class Resort(str, Enum):
    """DVC resorts a contract can be attached to."""

    ANIMAL_KINGDOM_JAMBO = "Animal Kingdom Villas - Jambo House"
    ANIMAL_KINGDOM_KIDANI = "Animal Kingdom Villas - Kidani Village"
    BAY_LAKE_TOWER = "Bay Lake Tower"
    BEACH_CLUB = "Beach Club Villas"
    BOARDWALK = "BoardWalk Villas"
    BOULDER_RIDGE = "Boulder Ridge Villas"
    COPPER_CREEK = "Copper Creek Villas"
    GRAND_FLORIDIAN = "Grand Floridian Villas"
    OLD_KEY_WEST = "Old Key West"
    POLYNESIAN = "Polynesian Villas"
    RIVIERA = "Riviera Resort"
    SARATOGA_SPRINGS = "Saratoga Springs"

    @property
    def slug(self) -> str:
        return re.sub(r"[^a-z0-9]+", "-", self.value.lower()).strip("-")


class UseYear(str, Enum):
    """Month in which a contract's point allocation renews."""

    JAN = "Jan"
    FEB = "Feb"
    MAR = "Mar"
    APR = "Apr"
    MAY = "May"
    JUN = "Jun"
    JUL = "Jul"
    AUG = "Aug"
    SEP = "Sep"
    OCT = "Oct"
    NOV = "Nov"
    DEC = "Dec"


class BookingWindow(str, Enum):
    """Booking window that admitted a reservation."""

    ELEVEN_MONTH = "11_month"
    SEVEN_MONTH = "7_month"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


@dataclass(frozen=True)
class ContractId:
    """Unique identifier for a DVC contract.

    Identifiers are URL-safe: letters, digits, dashes and underscores.
    """

    value: str

    def __post_init__(self) -> None:
        if not _CONTRACT_ID_PATTERN.match(self.value):
            raise ValueError(f"Invalid contract ID: {self.value!r}")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    @classmethod
    def generate(cls, home_resort: Resort) -> Self:
        return cls(value=f"{home_resort.slug}-{uuid4().hex[:12]}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a committed DVC booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())
