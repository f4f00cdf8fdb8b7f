"""In-process request dispatch through a mediator and behavior pipeline."""
from .core import (
    Command,
    HandlerRegistry,
    Mediator,
    PipelineBehavior,
    Query,
    Request,
    RequestHandler,
)

__version__ = "0.1.0"

__all__ = [
    'Command',
    'HandlerRegistry',
    'Mediator',
    'PipelineBehavior',
    'Query',
    'Request',
    'RequestHandler',
]
