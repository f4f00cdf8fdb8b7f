"""
Mediator - the single dispatch entry point.

The mediator:
1. Registers handlers for request discriminants
2. Registers pipeline behaviors (middleware)
3. Routes requests through the behavior pipeline to the matching handler
"""
import inspect
import logging
from typing import Any, Iterable, Optional, Tuple

from .exceptions import MediatorFrozenError
from .pipeline import build_pipeline
from .registry import HandlerRegistry, HandlerSource
from .requests import PipelineBehavior, Request, TResponse, discriminant_of

logger = logging.getLogger(__name__)


class Mediator:
    """
    Mediator implementation with behavior pipeline support.

    Configure it once (handlers and behaviors), then dispatch. The first
    ``send`` freezes the configuration; registering afterwards raises
    MediatorFrozenError. Concurrent ``send`` calls are independent: each gets
    its own pipeline over the shared, read-only behavior list and registry.
    """

    def __init__(
        self,
        registry: Optional[HandlerRegistry] = None,
        behaviors: Optional[Iterable[PipelineBehavior]] = None
    ):
        self._registry = registry if registry is not None else HandlerRegistry()
        self._behaviors = list(behaviors or [])
        self._frozen = False

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    @property
    def behaviors(self) -> Tuple[PipelineBehavior, ...]:
        """Registered behaviors, outermost first"""
        return tuple(self._behaviors)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register_handler(self, request_type: Any, handler: HandlerSource) -> None:
        """
        Register the handler for a request type.

        Args:
            request_type: The request class (or its discriminant string)
            handler: Handler instance, handler class or zero-argument factory

        Raises:
            DuplicateHandlerError: If the request type already has a handler
            MediatorFrozenError: If dispatching has already started
        """
        self._ensure_configurable()
        self._registry.register(request_type, handler)

    def register_behavior(self, behavior: PipelineBehavior) -> None:
        """
        Register a pipeline behavior (middleware).

        Behaviors are executed in registration order.

        Raises:
            MediatorFrozenError: If dispatching has already started
        """
        self._ensure_configurable()
        self._behaviors.append(behavior)
        logger.debug(f"Registered behavior {type(behavior).__name__}")

    # MediatR spelling
    add_behavior = register_behavior

    def freeze(self) -> None:
        """Close registration; later register_* calls fail"""
        self._frozen = True

    async def send(self, request: Request[TResponse]) -> TResponse:
        """
        Send a request through the pipeline to its handler.

        Flow:
        1. Handler is resolved by the request's discriminant
        2. Request passes through all registered behaviors
        3. Handler processes the request
        4. Response (or failure) bubbles back through the behaviors

        Args:
            request: The request to send

        Returns:
            The response from the handler, as shaped by the behaviors

        Raises:
            HandlerNotFoundError: If no handler is registered; no behavior runs
        """
        self._frozen = True

        # Resolve before building the pipeline so a missing handler never
        # reaches a behavior
        handler = self._registry.resolve(discriminant_of(request))

        async def final_handler():
            response = handler.handle(request)
            if inspect.isawaitable(response):
                response = await response
            return response

        pipeline = build_pipeline(self._behaviors, request, final_handler)
        return await pipeline()

    def _ensure_configurable(self) -> None:
        if self._frozen:
            raise MediatorFrozenError(
                "Mediator is frozen; register handlers and behaviors before the first send"
            )
