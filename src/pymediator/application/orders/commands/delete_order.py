from dataclasses import dataclass

from pymediator.core import Command, RequestHandler
from pymediator.ports.repositories import IOrderRepository


@dataclass(frozen=True)
class DeleteOrderCommand(Command[bool]):
    """Command to delete an order"""
    order_id: str


class DeleteOrderHandler(RequestHandler[DeleteOrderCommand, bool]):
    """Handler for order deletion, returns whether the order existed"""

    def __init__(self, order_repository: IOrderRepository):
        self._order_repo = order_repository

    async def handle(self, request: DeleteOrderCommand) -> bool:
        return self._order_repo.delete(request.order_id)
