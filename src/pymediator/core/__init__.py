"""
Simple CQRS/Mediator pattern implementation.

Routes typed requests to exactly one registered handler through an ordered
pipeline of behaviors.
"""
from .exceptions import (
    BehaviorError,
    DuplicateHandlerError,
    HandlerError,
    HandlerNotFoundError,
    MediatorConfigurationError,
    MediatorError,
    MediatorFrozenError,
    RequestTimeoutError,
    RetryableError,
    ValidationError,
)
from .mediator import Mediator
from .pipeline import build_pipeline
from .registry import HandlerRegistry
from .requests import (
    Command,
    NextHandler,
    PipelineBehavior,
    Query,
    Request,
    RequestHandler,
    discriminant_of,
)

__all__ = [
    'BehaviorError',
    'Command',
    'DuplicateHandlerError',
    'HandlerError',
    'HandlerNotFoundError',
    'HandlerRegistry',
    'Mediator',
    'MediatorConfigurationError',
    'MediatorError',
    'MediatorFrozenError',
    'NextHandler',
    'PipelineBehavior',
    'Query',
    'Request',
    'RequestHandler',
    'RequestTimeoutError',
    'RetryableError',
    'ValidationError',
    'build_pipeline',
    'discriminant_of',
]
