"""
Request, handler and behavior contracts for the mediator.

Requests carry a class-level discriminant that the handler registry is keyed
by. Handlers turn one request kind into its response; behaviors wrap the
handler call with cross-cutting logic.
"""
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, ClassVar, Generic, TypeVar, Union

# Type variables for request and response types
TRequest = TypeVar('TRequest')
TResponse = TypeVar('TResponse')

# Zero-argument coroutine function representing "the rest of the pipeline"
NextHandler = Callable[[], Awaitable[Any]]


class Request(Generic[TResponse], ABC):
    """
    Base class for all requests (commands and queries).

    Inheritors should be dataclasses with frozen=True for immutability.
    The generic type parameter TResponse indicates what type this request returns.

    Every subclass gets a ``discriminant`` - the tag the mediator resolves its
    handler by. It defaults to the class name and can be declared explicitly:

        @dataclass(frozen=True)
        class CreateItemCommand(Command[CreateItemResult]):
            discriminant: ClassVar[str] = "CreateItem"
            name: str
    """

    discriminant: ClassVar[str] = "Request"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'discriminant' not in cls.__dict__:
            cls.discriminant = cls.__name__


class Command(Request[TResponse]):
    """Request that changes state"""


class Query(Request[TResponse]):
    """Request that only reads state"""


class RequestHandler(Generic[TRequest, TResponse], ABC):
    """
    Base class for all request handlers.

    Handlers process requests and return responses of type TResponse.
    ``handle`` is usually a coroutine; plain synchronous handlers are
    accepted as well and their return value is used as-is.

    Example:
        class GetItemsHandler(RequestHandler[GetItemsQuery, List[Item]]):
            async def handle(self, request: GetItemsQuery) -> List[Item]:
                ...
    """

    @abstractmethod
    def handle(self, request: TRequest) -> Union[TResponse, Awaitable[TResponse]]:
        """
        Handle the request and return a response.

        Args:
            request: The request to handle

        Returns:
            The response of type TResponse
        """
        pass


class PipelineBehavior(ABC):
    """
    Base class for pipeline behaviors (middleware).

    Behaviors can intercept requests before/after handler execution.
    They form a pipeline where each behavior can:
    - Pre-process the request
    - Call the next behavior/handler (zero, one or several times)
    - Post-process the response
    - Handle exceptions
    """

    @abstractmethod
    async def handle(self, request: Any, next_handler: NextHandler) -> Any:
        """
        Handle the request and call next in pipeline.

        Args:
            request: The request to handle
            next_handler: Async callable to invoke next behavior/handler

        Returns:
            The response from the pipeline
        """
        pass


def discriminant_of(target: Any) -> str:
    """
    Resolve the registry key for a request, a request type or a raw tag.

    Objects that are not ``Request`` subclasses fall back to their class name.
    """
    if isinstance(target, str):
        if not target.strip():
            raise ValueError("discriminant cannot be empty")
        return target
    request_type = target if isinstance(target, type) else type(target)
    if issubclass(request_type, Request):
        return request_type.discriminant
    return request_type.__name__
