from dataclasses import dataclass

from pymediator.core import Command, RequestHandler
from pymediator.domain.shared.order import Order
from pymediator.ports.repositories import IOrderRepository


@dataclass(frozen=True)
class CreateOrderCommand(Command[Order]):
    """Command to open a new, empty order"""
    pass


class CreateOrderHandler(RequestHandler[CreateOrderCommand, Order]):
    """Handler for order creation"""

    def __init__(self, order_repository: IOrderRepository):
        self._order_repo = order_repository

    async def handle(self, request: CreateOrderCommand) -> Order:
        return self._order_repo.save(Order.create())
