from dataclasses import dataclass
from typing import List, Optional
from uuid import uuid4

from .value_objects import Money


@dataclass(frozen=True)
class Product:
    """Sellable product with a unit price"""
    product_id: str
    name: str
    price: Money


@dataclass(frozen=True)
class OrderItem:
    """One product on one order"""
    id: str
    order_id: str
    product: Product


class Order:
    """
    Order aggregate - line items plus the running total

    Invariants:
    - total_amount is the sum of the line item prices
    - all line items share one currency (the first item's)
    - removing a product that is not on the order changes nothing
    """

    def __init__(
        self,
        order_id: str,
        items: Optional[List[OrderItem]] = None,
        total_amount: Optional[Money] = None
    ):
        if not order_id or not order_id.strip():
            raise ValueError("order_id cannot be empty")

        self._order_id = order_id
        self._items: List[OrderItem] = list(items or [])
        self._total_amount = total_amount or Money.zero()

    @classmethod
    def create(cls) -> 'Order':
        """New empty order with a generated ID"""
        return cls(str(uuid4()))

    @property
    def order_id(self) -> str:
        return self._order_id

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def line_items(self) -> List[OrderItem]:
        return list(self._items)

    def add_line_item(self, product: Product) -> OrderItem:
        """
        Append a product to the order.

        Raises:
            CurrencyMismatchError: If the product is priced in another
                currency than the items already on the order
        """
        if self._items:
            total = self._total_amount.add(product.price)
        else:
            total = Money.zero(product.price.currency).add(product.price)

        line_item = OrderItem(id=str(uuid4()), order_id=self._order_id, product=product)
        self._items.append(line_item)
        self._total_amount = total
        return line_item

    def remove_line_item(self, product_id: str) -> bool:
        """Remove the first line item for a product; False if none matched"""
        for index, line_item in enumerate(self._items):
            if line_item.product.product_id == product_id:
                del self._items[index]
                self._total_amount = self._total_amount.subtract(line_item.product.price)
                return True
        return False

    def __repr__(self) -> str:
        return f"Order(order_id={self._order_id!r}, items={len(self._items)}, total={self._total_amount})"
