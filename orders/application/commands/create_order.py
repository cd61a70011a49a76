"""
CreateOrderCommand.

Command to place an order for one key of a tier.
"""
from dataclasses import dataclass
from decimal import Decimal


@dataclass
class CreateOrderCommand:
    """Command to create an order."""

    user_id: str
    product_type: str
    tier: str
    amount: Decimal
    currency: str
    payment_method: str
