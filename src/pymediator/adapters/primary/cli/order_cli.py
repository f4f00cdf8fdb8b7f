import argparse
import asyncio
from decimal import Decimal, InvalidOperation
from typing import List

from pymediator.configuration.container import get_mediator
from pymediator.application.orders.commands.add_line_item import AddLineItemCommand
from pymediator.application.orders.commands.create_order import CreateOrderCommand
from pymediator.application.orders.commands.remove_line_item import RemoveLineItemCommand
from pymediator.application.orders.queries.get_order import GetOrderQuery
from pymediator.core import MediatorError
from pymediator.domain.shared.order import Product
from pymediator.domain.shared.value_objects import Money


def parse_product(spec: str) -> Product:
    """
    Parse NAME:PRICE[:CURRENCY] into a product.

    The product ID is the lower-cased name.

    Raises:
        ValueError: If the product string is malformed
    """
    parts = spec.split(":")
    if len(parts) not in (2, 3) or not parts[0].strip():
        raise ValueError(f"Expected NAME:PRICE[:CURRENCY], got '{spec}'")

    name = parts[0].strip()
    try:
        amount = Decimal(parts[1])
    except InvalidOperation:
        raise ValueError(f"Invalid price '{parts[1]}' for {name}") from None
    currency = parts[2] if len(parts) == 3 else "USD"

    return Product(product_id=name.lower(), name=name, price=Money(amount, currency))


def quote_order_command(args: argparse.Namespace) -> int:
    """Handle order quote command"""
    try:
        products: List[Product] = [parse_product(spec) for spec in args.products]
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    mediator = get_mediator()

    async def run():
        order = await mediator.send(CreateOrderCommand())
        for product in products:
            await mediator.send(AddLineItemCommand(order_id=order.order_id, product=product))
        for name in args.remove or []:
            await mediator.send(RemoveLineItemCommand(order_id=order.order_id, product_id=name.strip().lower()))
        return await mediator.send(GetOrderQuery(order_id=order.order_id))

    try:
        order = asyncio.run(run())
    except MediatorError as e:
        print(f"❌ Error: {e}")
        return 1

    print(f"Order {order.order_id}:")
    for line_item in order.line_items:
        print(f"  {line_item.product.name}: {line_item.product.price}")
    print(f"  Total: {order.total_amount}")
    return 0


def setup_order_commands(subparsers):
    """Setup order CLI commands"""
    order_parser = subparsers.add_parser("order", help="Orders")
    order_subparsers = order_parser.add_subparsers(dest="order_command")

    # Quote command
    quote_parser = order_subparsers.add_parser("quote", help="Build an order and print its total")
    quote_parser.add_argument(
        "--product",
        dest="products",
        action="append",
        required=True,
        metavar="NAME:PRICE[:CURRENCY]"
    )
    quote_parser.add_argument(
        "--remove",
        action="append",
        metavar="NAME",
        help="Remove a product from the order again (repeatable)"
    )
    quote_parser.set_defaults(func=quote_order_command)
