"""
Unit tests for the dependency injection container
"""
import pytest

from pymediator.application.common.behaviors import (
    CachingBehavior,
    LoggingBehavior,
    RetryBehavior,
    TimeoutBehavior,
    ValidationBehavior
)
from pymediator.configuration.container import (
    build_behaviors,
    get_item_repository,
    get_mediator,
    reset_container
)
from pymediator.configuration.settings import Settings
from pymediator.core import MediatorFrozenError


class TestBuildBehaviors:
    """Tests for build_behaviors"""

    def test_full_pipeline_order(self):
        behaviors = build_behaviors(Settings(request_timeout=1.0))

        assert [type(b) for b in behaviors] == [
            LoggingBehavior,
            ValidationBehavior,
            CachingBehavior,
            RetryBehavior,
            TimeoutBehavior,
        ]

    def test_optional_behaviors_can_be_disabled(self):
        behaviors = build_behaviors(Settings(retry_attempts=1, cache_queries=False))

        assert [type(b) for b in behaviors] == [LoggingBehavior, ValidationBehavior]

    def test_settings_are_passed_through(self):
        behaviors = build_behaviors(Settings(retry_attempts=4, cache_size=8, request_timeout=0.5))
        by_type = {type(b): b for b in behaviors}

        assert by_type[RetryBehavior].max_attempts == 4
        assert by_type[CachingBehavior].max_entries == 8
        assert by_type[TimeoutBehavior].timeout_seconds == 0.5


class TestGetMediator:
    """Tests for get_mediator"""

    def test_mediator_is_a_singleton(self):
        assert get_mediator() is get_mediator()

    def test_all_handlers_registered(self):
        assert get_mediator().registry.discriminants() == [
            "CreateItem",
            "GetItems",
            "CreateOrderCommand",
            "AddLineItemCommand",
            "RemoveLineItemCommand",
            "DeleteOrderCommand",
            "GetOrderQuery",
            "ListOrdersQuery",
        ]

    def test_mediator_is_frozen(self):
        with pytest.raises(MediatorFrozenError):
            get_mediator().register_behavior(LoggingBehavior())

    def test_reset_container_builds_new_instances(self):
        mediator = get_mediator()
        repo = get_item_repository()

        reset_container()

        assert get_mediator() is not mediator
        assert get_item_repository() is not repo
