from dataclasses import dataclass

from pymediator.core import Command, RequestHandler
from pymediator.domain.shared.exceptions import OrderNotFoundError
from pymediator.domain.shared.order import Order, Product
from pymediator.ports.repositories import IOrderRepository


@dataclass(frozen=True)
class AddLineItemCommand(Command[Order]):
    """Command to put a product on an order"""
    order_id: str
    product: Product


class AddLineItemHandler(RequestHandler[AddLineItemCommand, Order]):
    """Handler for adding line items"""

    def __init__(self, order_repository: IOrderRepository):
        self._order_repo = order_repository

    async def handle(self, request: AddLineItemCommand) -> Order:
        """
        Add the product and store the order

        Raises:
            OrderNotFoundError: If the order does not exist
            CurrencyMismatchError: If the product currency differs from the order's
        """
        order = self._order_repo.get_by_id(request.order_id)
        if not order:
            raise OrderNotFoundError(f"Order {request.order_id} not found")

        order.add_line_item(request.product)
        self._order_repo.update(order)
        return order
