"""
GetOrderQuery.
"""
import uuid
from dataclasses import dataclass


@dataclass
class GetOrderQuery:
    """Query for one of the user's orders."""

    order_id: uuid.UUID
    user_id: str
