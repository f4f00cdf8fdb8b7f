"""Step definitions for Handler registry BDD tests"""
import asyncio
from dataclasses import dataclass
from typing import ClassVar

from pytest_bdd import scenarios, given, when, then, parsers

from pymediator.application.common.behaviors import LoggingBehavior
from pymediator.core import (
    Command,
    DuplicateHandlerError,
    HandlerNotFoundError,
    HandlerRegistry,
    Mediator,
    MediatorFrozenError,
    Query,
    RequestHandler,
)

scenarios('../../features/core/handler_registry.feature')


@dataclass(frozen=True)
class CreateItemRequest(Command[str]):
    discriminant: ClassVar[str] = "CreateItem"
    name: str


@dataclass(frozen=True)
class PingRequest(Query[str]):
    pass


class EchoHandler(RequestHandler[object, str]):
    async def handle(self, request):
        return "pong"


# Given Steps

@given("an empty handler registry")
def empty_registry(context):
    context['registry'] = HandlerRegistry()
    context['error'] = None


@given(parsers.parse('a handler instance registered for "{discriminant}"'))
def register_instance(context, discriminant):
    handler = EchoHandler()
    context['registry'].register(discriminant, handler)
    context['handler'] = handler


@given(parsers.parse('a handler factory registered for "{discriminant}"'))
def register_factory(context, discriminant):
    context['registry'].register(discriminant, lambda: EchoHandler())


@given(parsers.parse('a handler class registered for "{discriminant}"'))
def register_class(context, discriminant):
    context['registry'].register(discriminant, EchoHandler)


@given("a handler instance registered for the create item request type")
def register_for_create_item_type(context):
    context['registry'].register(CreateItemRequest, EchoHandler())


@given("a handler instance registered for the ping request type")
def register_for_ping_type(context):
    context['registry'].register(PingRequest, EchoHandler())


@given("a mediator over the registry with a handler for the ping request type")
def mediator_over_registry(context):
    mediator = Mediator(registry=context['registry'])
    mediator.register_handler(PingRequest, EchoHandler)
    context['mediator'] = mediator


# When Steps

@when(parsers.parse('I resolve "{discriminant}"'))
def resolve(context, discriminant):
    try:
        context['resolved'] = context['registry'].resolve(discriminant)
    except Exception as e:
        context['error'] = e


@when(parsers.parse('I resolve "{discriminant}" twice'))
def resolve_twice(context, discriminant):
    registry = context['registry']
    context['resolved_pair'] = (registry.resolve(discriminant), registry.resolve(discriminant))


@when(parsers.parse('I register another handler for "{discriminant}"'))
def register_another(context, discriminant):
    try:
        context['registry'].register(discriminant, EchoHandler())
    except Exception as e:
        context['error'] = e


@when(parsers.parse('I register the number 42 for "{discriminant}"'))
def register_number(context, discriminant):
    try:
        context['registry'].register(discriminant, 42)
    except Exception as e:
        context['error'] = e


@when("the mediator sends a ping request")
def mediator_sends_ping(context):
    context['result'] = asyncio.run(context['mediator'].send(PingRequest()))


@when("the mediator is frozen")
def mediator_frozen(context):
    context['mediator'].freeze()


@when(parsers.parse('I register a handler through the mediator for "{discriminant}"'))
def register_through_mediator(context, discriminant):
    try:
        context['mediator'].register_handler(discriminant, EchoHandler())
    except Exception as e:
        context['error'] = e


@when("I add a behavior through the mediator")
def add_behavior_through_mediator(context):
    try:
        context['mediator'].add_behavior(LoggingBehavior())
    except Exception as e:
        context['error'] = e


# Then Steps

@then("the resolved handler should be the registered instance")
def resolved_is_instance(context):
    assert context['resolved'] is context['handler']


@then("the resolved handler should be an instance of the registered class")
def resolved_is_class_instance(context):
    assert isinstance(context['resolved'], EchoHandler)


@then("two distinct handler instances should be returned")
def distinct_instances(context):
    first, second = context['resolved_pair']
    assert isinstance(first, EchoHandler)
    assert isinstance(second, EchoHandler)
    assert first is not second


@then(parsers.parse('registration should fail with DuplicateHandlerError for "{discriminant}"'))
def duplicate_error(context, discriminant):
    assert isinstance(context['error'], DuplicateHandlerError)
    assert context['error'].discriminant == discriminant


@then(parsers.parse('resolution should fail with HandlerNotFoundError for "{discriminant}"'))
def not_found_error(context, discriminant):
    assert isinstance(context['error'], HandlerNotFoundError)
    assert context['error'].discriminant == discriminant
    assert discriminant in str(context['error'])


@then("registration should fail with TypeError")
def type_error(context):
    assert isinstance(context['error'], TypeError)


@then("registration should fail with MediatorFrozenError")
def frozen_error(context):
    assert isinstance(context['error'], MediatorFrozenError)


@then(parsers.parse("the registry should hold {count:d} handlers"))
def registry_size(context, count):
    assert len(context['registry']) == count


@then(parsers.parse('the registry should contain "{discriminant}"'))
def registry_contains(context, discriminant):
    assert discriminant in context['registry']


@then(parsers.parse('the registry should not contain "{discriminant}"'))
def registry_not_contains(context, discriminant):
    assert discriminant not in context['registry']


@then(parsers.parse('the registered discriminants should be "{expected}"'))
def registered_discriminants(context, expected):
    assert context['registry'].discriminants() == [name.strip() for name in expected.split(",")]


@then(parsers.parse("the mediator should have {count:d} behaviors"))
def mediator_behavior_count(context, count):
    assert len(context['mediator'].behaviors) == count
