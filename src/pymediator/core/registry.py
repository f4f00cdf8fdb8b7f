"""
Handler registry keyed by request discriminant.

Each discriminant maps to exactly one handler factory. Registering a second
handler for the same discriminant is a configuration error rather than a
silent replacement.
"""
import logging
from typing import Any, Callable, Dict, List, Union

from .exceptions import DuplicateHandlerError, HandlerNotFoundError
from .requests import RequestHandler, discriminant_of

logger = logging.getLogger(__name__)

HandlerFactory = Callable[[], RequestHandler]
HandlerSource = Union[RequestHandler, type, HandlerFactory]


class HandlerRegistry:
    """
    Mapping from request discriminant to the factory that builds its handler.

    A handler can be registered as:
    - an instance (reused for every dispatch)
    - a handler class taking no constructor arguments
    - a zero-argument factory, e.g. ``lambda: CreateItemHandler(repo)``

    Not thread-safe: populate it during setup, then only resolve.
    """

    def __init__(self):
        self._factories: Dict[str, HandlerFactory] = {}

    def register(self, discriminant: Any, handler: HandlerSource) -> None:
        """
        Bind a handler to a discriminant.

        Args:
            discriminant: Request type, request instance or raw tag string
            handler: Handler instance, handler class or factory

        Raises:
            DuplicateHandlerError: If the discriminant is already bound
            TypeError: If handler is none of the accepted forms
        """
        key = discriminant_of(discriminant)
        if key in self._factories:
            raise DuplicateHandlerError(key)

        self._factories[key] = _as_factory(handler)
        logger.debug(f"Registered handler for {key}")

    def resolve(self, discriminant: Any) -> RequestHandler:
        """
        Build the handler bound to a discriminant.

        Raises:
            HandlerNotFoundError: If nothing is bound to the discriminant
        """
        key = discriminant_of(discriminant)
        factory = self._factories.get(key)
        if factory is None:
            raise HandlerNotFoundError(key)
        return factory()

    def is_registered(self, discriminant: Any) -> bool:
        return discriminant_of(discriminant) in self._factories

    def discriminants(self) -> List[str]:
        """Registered discriminants in registration order"""
        return list(self._factories)

    def __contains__(self, discriminant: Any) -> bool:
        return self.is_registered(discriminant)

    def __len__(self) -> int:
        return len(self._factories)


def _as_factory(handler: HandlerSource) -> HandlerFactory:
    # Classes also expose ``handle``, so check them before instances
    if isinstance(handler, type):
        return handler
    if callable(getattr(handler, 'handle', None)):
        return lambda: handler
    if callable(handler):
        return handler
    raise TypeError(
        f"Expected a handler, handler class or factory, got {type(handler).__name__}"
    )
