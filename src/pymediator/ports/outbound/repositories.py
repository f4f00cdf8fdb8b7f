from abc import ABC, abstractmethod
from typing import List, Optional

from pymediator.domain.shared.item import Item
from pymediator.domain.shared.order import Order


class IItemRepository(ABC):
    """Port for item persistence"""

    @abstractmethod
    def create(self, item: Item) -> Item:
        """Persist new item, returns item with assigned ID"""
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """Check if an item name is already taken"""
        pass

    @abstractmethod
    def search(self, keyword: str) -> List[Item]:
        """Items whose name contains keyword, in creation order"""
        pass


class IOrderRepository(ABC):
    """Port for order persistence"""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist new order"""
        pass

    @abstractmethod
    def update(self, order: Order) -> Optional[Order]:
        """Replace a stored order; None if it was never saved"""
        pass

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order, returns whether it existed"""
        pass

    @abstractmethod
    def get_by_id(self, order_id: str) -> Optional[Order]:
        """Load order by ID"""
        pass

    @abstractmethod
    def get_all(self) -> List[Order]:
        """List all stored orders"""
        pass
