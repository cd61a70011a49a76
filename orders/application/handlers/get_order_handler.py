"""
GetOrderHandler.
"""
from core.domain.exceptions import OrderNotFoundError
from orders.application.dto.order_dto import OrderDTO
from orders.application.queries.get_order import GetOrderQuery
from orders.ports.order_repository import OrderRepository


class GetOrderHandler:
    """Handler for GetOrderQuery."""

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def handle(self, query: GetOrderQuery) -> OrderDTO:
        """
        Handle get order query.

        Orders of other users are reported as missing.

        Raises:
            OrderNotFoundError: If order not found
        """
        order = await self.order_repository.find_by_id(query.order_id)
        if not order or order.user_id != str(query.user_id):
            raise OrderNotFoundError(f"Order {query.order_id} not found")
        return OrderDTO.from_entity(order)
