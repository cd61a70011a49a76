"""
GetAssignmentQuery.

Query to look up the key issued to an order.
"""
from dataclasses import dataclass


@dataclass
class GetAssignmentQuery:
    """Query for an order's assignment."""

    order_id: str
