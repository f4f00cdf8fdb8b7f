"""
Dependency Injection Container.

Provides singleton instances and factory methods for:
- Repositories
- Mediator with all handlers registered
- Pipeline behaviors (middleware)
"""
from typing import List, Optional

from pymediator.adapters.secondary.persistence.memory import (
    InMemoryItemRepository,
    InMemoryOrderRepository
)
from pymediator.application.common.behaviors import (
    CachingBehavior,
    LoggingBehavior,
    RetryBehavior,
    TimeoutBehavior,
    ValidationBehavior
)
from pymediator.application.items.commands.create_item import (
    CreateItemCommand,
    CreateItemHandler
)
from pymediator.application.items.queries.get_items import (
    GetItemsQuery,
    GetItemsHandler
)
from pymediator.application.orders.commands.create_order import (
    CreateOrderCommand,
    CreateOrderHandler
)
from pymediator.application.orders.commands.add_line_item import (
    AddLineItemCommand,
    AddLineItemHandler
)
from pymediator.application.orders.commands.remove_line_item import (
    RemoveLineItemCommand,
    RemoveLineItemHandler
)
from pymediator.application.orders.commands.delete_order import (
    DeleteOrderCommand,
    DeleteOrderHandler
)
from pymediator.application.orders.queries.get_order import (
    GetOrderQuery,
    GetOrderHandler,
    ListOrdersQuery,
    ListOrdersHandler
)
from pymediator.core import Mediator, PipelineBehavior, RequestTimeoutError, RetryableError
from pymediator.ports.repositories import IItemRepository, IOrderRepository
from .settings import Settings, get_settings


# Singleton instances
_item_repo = None
_order_repo = None
_mediator = None


def get_item_repository() -> IItemRepository:
    """
    Get or create item repository.

    Returns:
        IItemRepository: Singleton item repository instance
    """
    global _item_repo
    if _item_repo is None:
        _item_repo = InMemoryItemRepository()
    return _item_repo


def get_order_repository() -> IOrderRepository:
    """
    Get or create order repository.

    Returns:
        IOrderRepository: Singleton order repository instance
    """
    global _order_repo
    if _order_repo is None:
        _order_repo = InMemoryOrderRepository()
    return _order_repo


def build_behaviors(settings: Optional[Settings] = None) -> List[PipelineBehavior]:
    """
    Build the pipeline behaviors in execution order.

    Logging -> Validation -> Caching -> Retry -> Timeout -> Handler. A cache
    hit never counts as a retry attempt; the timeout applies per attempt.

    Args:
        settings: Settings to read; defaults to the global settings

    Returns:
        Behaviors, outermost first
    """
    settings = settings or get_settings()

    behaviors: List[PipelineBehavior] = [LoggingBehavior(), ValidationBehavior()]
    if settings.cache_queries:
        behaviors.append(CachingBehavior(max_entries=settings.cache_size))
    if settings.retry_attempts > 1:
        behaviors.append(RetryBehavior(
            max_attempts=settings.retry_attempts,
            retry_on=(RetryableError, RequestTimeoutError),
            delay=settings.retry_delay
        ))
    if settings.request_timeout is not None:
        behaviors.append(TimeoutBehavior(settings.request_timeout))
    return behaviors


def get_mediator() -> Mediator:
    """
    Get or create configured mediator with all handlers registered.

    The mediator is configured with:
    1. Pipeline behaviors from build_behaviors()
    2. All command handlers
    3. All query handlers

    It is frozen before being returned.

    Returns:
        Mediator: Fully configured mediator instance
    """
    global _mediator
    if _mediator is None:
        mediator = Mediator(behaviors=build_behaviors())

        item_repo = get_item_repository()
        order_repo = get_order_repository()

        # ===== Item Handlers =====
        mediator.register_handler(
            CreateItemCommand,
            lambda: CreateItemHandler(item_repo)
        )
        mediator.register_handler(
            GetItemsQuery,
            lambda: GetItemsHandler(item_repo)
        )

        # ===== Order Command Handlers =====
        mediator.register_handler(
            CreateOrderCommand,
            lambda: CreateOrderHandler(order_repo)
        )
        mediator.register_handler(
            AddLineItemCommand,
            lambda: AddLineItemHandler(order_repo)
        )
        mediator.register_handler(
            RemoveLineItemCommand,
            lambda: RemoveLineItemHandler(order_repo)
        )
        mediator.register_handler(
            DeleteOrderCommand,
            lambda: DeleteOrderHandler(order_repo)
        )

        # ===== Order Query Handlers =====
        mediator.register_handler(
            GetOrderQuery,
            lambda: GetOrderHandler(order_repo)
        )
        mediator.register_handler(
            ListOrdersQuery,
            lambda: ListOrdersHandler(order_repo)
        )

        mediator.freeze()
        _mediator = mediator

    return _mediator


def reset_container():
    """Reset all singleton instances (useful for testing)"""
    global _item_repo, _order_repo, _mediator
    _item_repo = None
    _order_repo = None
    _mediator = None
