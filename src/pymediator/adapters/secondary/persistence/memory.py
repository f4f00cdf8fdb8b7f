"""
In-memory repository adapters.

Dictionaries keyed by ID; contents live as long as the process. Used by the
CLI and by tests in place of a database.
"""
import logging
from dataclasses import replace
from itertools import count
from typing import Dict, List, Optional

from pymediator.domain.shared.item import Item
from pymediator.domain.shared.order import Order
from pymediator.ports.outbound.repositories import IItemRepository, IOrderRepository

logger = logging.getLogger(__name__)


class InMemoryItemRepository(IItemRepository):
    """Item store with sequential integer IDs"""

    def __init__(self):
        self._items: Dict[int, Item] = {}
        self._ids = count(1)

    def create(self, item: Item) -> Item:
        stored = replace(item, item_id=next(self._ids))
        self._items[stored.item_id] = stored
        logger.debug(f"Stored item {stored.item_id}: {stored.name}")
        return stored

    def exists_by_name(self, name: str) -> bool:
        name = name.strip()
        return any(item.name == name for item in self._items.values())

    def search(self, keyword: str) -> List[Item]:
        return [item for item in self._items.values() if item.matches(keyword)]


class InMemoryOrderRepository(IOrderRepository):
    """Order store keyed by order ID"""

    def __init__(self):
        self._orders: Dict[str, Order] = {}

    def save(self, order: Order) -> Order:
        self._orders[order.order_id] = order
        return order

    def update(self, order: Order) -> Optional[Order]:
        if order.order_id not in self._orders:
            return None
        self._orders[order.order_id] = order
        return order

    def delete(self, order_id: str) -> bool:
        return self._orders.pop(order_id, None) is not None

    def get_by_id(self, order_id: str) -> Optional[Order]:
        return self._orders.get(order_id)

    def get_all(self) -> List[Order]:
        return list(self._orders.values())
