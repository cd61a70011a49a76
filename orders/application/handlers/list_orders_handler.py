"""
ListOrdersHandler.
"""
from typing import List

from orders.application.dto.order_dto import OrderDTO
from orders.application.queries.list_orders import ListOrdersQuery
from orders.ports.order_repository import OrderRepository


class ListOrdersHandler:
    """Handler for ListOrdersQuery."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def handle(self, query: ListOrdersQuery) -> List[OrderDTO]:
        orders = await self.order_repository.find_by_user(query.user_id)
        return [OrderDTO.from_entity(order) for order in orders]
