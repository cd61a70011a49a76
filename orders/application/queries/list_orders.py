"""
ListOrdersQuery.
"""
from dataclasses import dataclass


@dataclass
class ListOrdersQuery:
    """Query for all orders of a user."""

    user_id: str
