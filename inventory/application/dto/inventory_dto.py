"""
Inventory DTOs for API responses.
"""
from dataclasses import dataclass
from typing import Dict, List


@dataclass
class IngestResultDTO:
    """DTO for a bulk add outcome."""

    tier: str
    added: int
    duplicates: int


@dataclass
class PoolDTO:
    """DTO for a tier's available keys."""

    tier: str
    count: int
    keys: List[str]


@dataclass
class KeyStatsDTO:
    """DTO for inventory statistics."""

    available: Dict[str, int]
    assigned: Dict[str, int]
    total_assigned: int
