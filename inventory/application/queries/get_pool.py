"""
GetPoolQuery.

Query to list the available keys of a tier.
"""
from dataclasses import dataclass


@dataclass
class GetPoolQuery:
    """Query for one tier's pool contents."""

    tier: str
