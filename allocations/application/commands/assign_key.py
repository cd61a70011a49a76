"""
AssignKeyCommand.

Command to issue one key of a tier to a paid order.
"""
from dataclasses import dataclass

from core.domain.value_objects import Tier


@dataclass
class AssignKeyCommand:
    """Command to allocate a key for an order."""

    tier: Tier
    order_id: str
    user_id: str
    product_type: str
