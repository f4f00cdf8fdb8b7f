import argparse
import asyncio

from pymediator.configuration.container import get_mediator
from pymediator.application.items.commands.create_item import CreateItemCommand
from pymediator.application.items.queries.get_items import GetItemsQuery
from pymediator.core import MediatorError


def create_items_command(args: argparse.Namespace) -> int:
    """Handle item create command"""
    mediator = get_mediator()

    for name in args.names:
        try:
            result = asyncio.run(mediator.send(CreateItemCommand(name=name)))
        except MediatorError as e:
            print(f"❌ Error: {e}")
            return 1
        print(f"✅ Created item {result.item_id}: {result.name}")

    return 0


def search_items_command(args: argparse.Namespace) -> int:
    """Handle item search command"""
    mediator = get_mediator()

    async def run():
        for name in args.create or []:
            await mediator.send(CreateItemCommand(name=name))
        return await mediator.send(GetItemsQuery(keyword=args.keyword))

    try:
        items = asyncio.run(run())
    except MediatorError as e:
        print(f"❌ Error: {e}")
        return 1

    if not items:
        print(f"No items matching '{args.keyword}'")
        return 0

    print(f"Items matching '{args.keyword}' ({len(items)}):")
    for item in items:
        print(f"  [{item.item_id}] {item.name}")
    return 0


def setup_item_commands(subparsers):
    """Setup item CLI commands"""
    item_parser = subparsers.add_parser("item", help="Item catalogue")
    item_subparsers = item_parser.add_subparsers(dest="item_command")

    # Create command
    create_parser = item_subparsers.add_parser("create", help="Create items")
    create_parser.add_argument("names", nargs="+", metavar="NAME")
    create_parser.set_defaults(func=create_items_command)

    # Search command
    search_parser = item_subparsers.add_parser("search", help="Search items by keyword")
    search_parser.add_argument("--keyword", default="")
    search_parser.add_argument(
        "--create",
        action="append",
        metavar="NAME",
        help="Create an item before searching (repeatable)"
    )
    search_parser.set_defaults(func=search_items_command)
