import argparse
import asyncio

from pymediator.configuration.container import get_mediator
from pymediator.application.items.commands.create_item import CreateItemCommand
from pymediator.application.items.queries.get_items import GetItemsQuery
from pymediator.application.orders.commands.add_line_item import AddLineItemCommand
from pymediator.application.orders.commands.create_order import CreateOrderCommand
from pymediator.application.orders.commands.remove_line_item import RemoveLineItemCommand
from pymediator.domain.shared.exceptions import DuplicateItemError
from pymediator.domain.shared.order import Product
from pymediator.domain.shared.value_objects import Money


async def run_demo() -> None:
    """Send a fixed series of commands and queries through the mediator"""
    mediator = get_mediator()

    for name in ("Widget", "Gadget", "Widget Pro"):
        result = await mediator.send(CreateItemCommand(name=name))
        print(f"CreateItem -> created={result.created} name={result.name}")

    try:
        await mediator.send(CreateItemCommand(name="Widget"))
    except DuplicateItemError as e:
        print(f"CreateItem -> failed: {e}")

    items = await mediator.send(GetItemsQuery(keyword="widget"))
    print(f"GetItems('widget') -> {[item.name for item in items]}")

    first = Product("product-1", "Product 1", Money("20.00", "USD"))
    second = Product("product-2", "Product 2", Money("30.00", "USD"))

    order = await mediator.send(CreateOrderCommand())
    await mediator.send(AddLineItemCommand(order_id=order.order_id, product=first))
    order = await mediator.send(AddLineItemCommand(order_id=order.order_id, product=second))
    print(f"Order total with 2 products -> {order.total_amount}")

    order = await mediator.send(RemoveLineItemCommand(order_id=order.order_id, product_id="product-1"))
    print(f"Order total after removing Product 1 -> {order.total_amount}")


def demo_command(args: argparse.Namespace) -> int:
    """Handle demo command"""
    asyncio.run(run_demo())
    return 0


def list_handlers_command(args: argparse.Namespace) -> int:
    """Handle handlers command"""
    mediator = get_mediator()

    print(f"Registered handlers ({len(mediator.registry)}):")
    for discriminant in mediator.registry.discriminants():
        print(f"  {discriminant}")

    print("Behaviors (outermost first):")
    for behavior in mediator.behaviors:
        print(f"  {type(behavior).__name__}")
    return 0


def setup_demo_commands(subparsers):
    """Setup demo and introspection CLI commands"""
    demo_parser = subparsers.add_parser("demo", help="Run a sample dispatch session")
    demo_parser.set_defaults(func=demo_command)

    handlers_parser = subparsers.add_parser("handlers", help="List handlers and behaviors")
    handlers_parser.set_defaults(func=list_handlers_command)
