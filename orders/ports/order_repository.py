"""
OrderRepository port (interface).

This defines the contract for order persistence.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain.value_objects import Tier
from orders.domain.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order entities."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """
        Save an order (create or update).

        Args:
            order: Order entity to save

        Returns:
            Saved Order entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: uuid.UUID) -> Optional[Order]:
        """
        Find order by ID.

        Args:
            order_id: Order UUID

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Order]:
        """
        List a user's orders, newest first.

        Args:
            user_id: User identifier

        Returns:
            List of Order entities
        """
        pass

    @abstractmethod
    async def find_awaiting_stock(self, tier: Tier) -> List[Order]:
        """
        List out-of-stock orders of a tier, oldest first.

        Args:
            tier: Tier to inspect

        Returns:
            List of Order entities
        """
        pass
