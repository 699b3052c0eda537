"""
Placement Value Objects

Architectural Intent:
- Immutable references to where a node lives (region, availability zone)
- Resolved by the caller before a command is composed
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class Region:
    uuid: UUID
    code: str
    provider_uuid: UUID
    yb_image: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Region code cannot be empty")

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class AvailabilityZone:
    uuid: UUID
    code: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Availability zone code cannot be empty")

    def __str__(self) -> str:
        return self.code
