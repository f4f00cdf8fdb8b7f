from dataclasses import dataclass
from typing import List

from pymediator.core import Query, RequestHandler
from pymediator.domain.shared.exceptions import OrderNotFoundError
from pymediator.domain.shared.order import Order
from pymediator.ports.repositories import IOrderRepository


@dataclass(frozen=True)
class GetOrderQuery(Query[Order]):
    """Query to get order by ID"""
    order_id: str


class GetOrderHandler(RequestHandler[GetOrderQuery, Order]):
    """Handler for getting order by ID"""

    def __init__(self, order_repository: IOrderRepository):
        self._order_repo = order_repository

    async def handle(self, request: GetOrderQuery) -> Order:
        """Get order by ID"""
        order = self._order_repo.get_by_id(request.order_id)
        if not order:
            raise OrderNotFoundError(f"Order {request.order_id} not found")
        return order


@dataclass(frozen=True)
class ListOrdersQuery(Query[List[Order]]):
    """Query to list all orders"""
    pass


class ListOrdersHandler(RequestHandler[ListOrdersQuery, List[Order]]):
    """Handler for listing orders"""

    def __init__(self, order_repository: IOrderRepository):
        self._order_repo = order_repository

    async def handle(self, request: ListOrdersQuery) -> List[Order]:
        return self._order_repo.get_all()
