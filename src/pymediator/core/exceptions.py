class MediatorError(Exception):
    """Base exception for all dispatch errors"""
    pass


class MediatorConfigurationError(MediatorError):
    """Raised when the mediator is set up incorrectly"""
    pass


class DuplicateHandlerError(MediatorConfigurationError):
    """Raised when a second handler is registered for the same discriminant"""

    def __init__(self, discriminant: str):
        super().__init__(f"A handler is already registered for {discriminant}")
        self.discriminant = discriminant


class MediatorFrozenError(MediatorConfigurationError):
    """Raised when registering after the mediator started dispatching"""
    pass


class HandlerNotFoundError(MediatorError):
    """Raised when no handler is registered for a request's discriminant"""

    def __init__(self, discriminant: str):
        super().__init__(f"No handler registered for {discriminant}")
        self.discriminant = discriminant


class HandlerError(MediatorError):
    """Base for failures raised by a handler's own logic"""
    pass


class RetryableError(HandlerError):
    """Handler failure that may succeed when attempted again"""
    pass


class BehaviorError(MediatorError):
    """Base for failures raised by a pipeline behavior itself"""
    pass


class ValidationError(BehaviorError):
    """Raised when a request fails its own validate() check"""
    pass


class RequestTimeoutError(BehaviorError):
    """Raised when the rest of the pipeline did not finish in time"""

    def __init__(self, request_name: str, timeout_seconds: float):
        super().__init__(f"{request_name} timed out after {timeout_seconds}s")
        self.request_name = request_name
        self.timeout_seconds = timeout_seconds
