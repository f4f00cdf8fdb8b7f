import logging
from dataclasses import dataclass

from pymediator.core import Command, RequestHandler
from pymediator.domain.shared.exceptions import OrderNotFoundError
from pymediator.domain.shared.order import Order
from pymediator.ports.repositories import IOrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveLineItemCommand(Command[Order]):
    """Command to take a product off an order"""
    order_id: str
    product_id: str


class RemoveLineItemHandler(RequestHandler[RemoveLineItemCommand, Order]):
    """Handler for removing line items"""

    def __init__(self, order_repository: IOrderRepository):
        self._order_repo = order_repository

    async def handle(self, request: RemoveLineItemCommand) -> Order:
        """
        Remove the product if present; an absent product leaves the order as is

        Raises:
            OrderNotFoundError: If the order does not exist
        """
        order = self._order_repo.get_by_id(request.order_id)
        if not order:
            raise OrderNotFoundError(f"Order {request.order_id} not found")

        if order.remove_line_item(request.product_id):
            self._order_repo.update(order)
        else:
            logger.debug(f"Product {request.product_id} not on order {request.order_id}")
        return order
