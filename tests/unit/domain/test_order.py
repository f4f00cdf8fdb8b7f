"""
Unit tests for Money and the Order aggregate
"""
from decimal import Decimal

import pytest

from pymediator.core import HandlerError
from pymediator.domain.shared.exceptions import CurrencyMismatchError
from pymediator.domain.shared.item import Item
from pymediator.domain.shared.order import Order, Product
from pymediator.domain.shared.value_objects import Money


def product(product_id, amount, currency="USD"):
    return Product(product_id=product_id, name=product_id, price=Money(Decimal(amount), currency))


class TestMoney:
    """Tests for Money value object"""

    def test_amount_is_normalised_to_decimal(self):
        money = Money("20.10", "usd")

        assert money.amount == Decimal("20.10")
        assert money.currency == "USD"

    def test_add_and_subtract_same_currency(self):
        total = Money(Decimal("20.00")).add(Money(Decimal("30.50")))

        assert total == Money(Decimal("50.50"))
        assert total.subtract(Money(Decimal("0.50"))) == Money(Decimal("50.00"))

    def test_mixing_currencies_fails(self):
        with pytest.raises(CurrencyMismatchError):
            Money(Decimal("1"), "USD").add(Money(Decimal("1"), "EUR"))

    def test_currency_mismatch_is_a_handler_error(self):
        assert issubclass(CurrencyMismatchError, HandlerError)

    def test_invalid_currency_code(self):
        with pytest.raises(ValueError):
            Money(Decimal("1"), "DOLLARS")

    def test_str(self):
        assert str(Money(Decimal("5"), "EUR")) == "5.00 EUR"


class TestOrder:
    """Tests for Order aggregate"""

    def test_create_generates_unique_ids(self):
        assert Order.create().order_id != Order.create().order_id

    def test_new_order_is_empty(self):
        order = Order.create()

        assert order.line_items == []
        assert order.total_amount == Money.zero()

    def test_add_line_item_updates_total(self):
        order = Order.create()

        line_item = order.add_line_item(product("p1", "20.00"))
        order.add_line_item(product("p2", "30.00"))

        assert line_item.order_id == order.order_id
        assert [item.product.product_id for item in order.line_items] == ["p1", "p2"]
        assert order.total_amount == Money(Decimal("50.00"))

    def test_first_item_sets_currency(self):
        order = Order.create()

        order.add_line_item(product("p1", "9.99", "EUR"))

        assert order.total_amount == Money(Decimal("9.99"), "EUR")

    def test_currency_mismatch_leaves_order_unchanged(self):
        order = Order.create()
        order.add_line_item(product("p1", "20.00"))

        with pytest.raises(CurrencyMismatchError):
            order.add_line_item(product("p2", "5.00", "EUR"))

        assert len(order.line_items) == 1
        assert order.total_amount == Money(Decimal("20.00"))

    def test_remove_line_item(self):
        order = Order.create()
        order.add_line_item(product("p1", "20.00"))
        order.add_line_item(product("p2", "30.00"))

        assert order.remove_line_item("p1") is True
        assert order.total_amount == Money(Decimal("30.00"))

    def test_remove_only_first_matching_line_item(self):
        order = Order.create()
        order.add_line_item(product("p1", "20.00"))
        order.add_line_item(product("p1", "20.00"))

        order.remove_line_item("p1")

        assert len(order.line_items) == 1
        assert order.total_amount == Money(Decimal("20.00"))

    def test_remove_absent_product_is_noop(self):
        order = Order.create()
        order.add_line_item(product("p1", "20.00"))

        assert order.remove_line_item("nope") is False
        assert order.total_amount == Money(Decimal("20.00"))

    def test_line_items_are_a_copy(self):
        order = Order.create()
        order.add_line_item(product("p1", "20.00"))

        order.line_items.clear()

        assert len(order.line_items) == 1

    def test_empty_order_id_rejected(self):
        with pytest.raises(ValueError):
            Order(" ")


class TestItem:
    """Tests for Item"""

    def test_name_is_stripped(self):
        assert Item(name="  Widget ").name == "Widget"

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            Item(name="   ")

    def test_matches_is_case_insensitive(self):
        item = Item(name="Widget Pro")

        assert item.matches("widget")
        assert item.matches("")
        assert not item.matches("gadget")
