"""
RecordPaymentCommand.

Command carrying an already-verified payment outcome for an order.
"""
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class RecordPaymentCommand:
    """Command to apply a payment event to an order."""

    order_id: uuid.UUID
    status: str  # "paid" or "failed"
    event_id: Optional[str] = None
