"""
RetryFulfillmentCommand.

Command to re-drive out-of-stock orders of a tier.
"""
from dataclasses import dataclass

from core.domain.value_objects import Tier


@dataclass
class RetryFulfillmentCommand:
    """Command to retry fulfillment of a tier's waiting orders."""

    tier: Tier
