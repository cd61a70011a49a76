"""
GetKeyStatsQuery.

Query for available and assigned counts across all tiers.
"""
from dataclasses import dataclass


@dataclass
class GetKeyStatsQuery:
    """Query for inventory statistics."""

    pass
