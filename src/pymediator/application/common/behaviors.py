"""
Pipeline behaviors (middleware) for the mediator.

Behaviors intercept requests before/after handler execution.
They form a pipeline where each behavior can:
- Pre-process the request
- Call the next behavior/handler
- Post-process the response
- Handle exceptions
"""
import asyncio
import copy
import logging
import time
from collections import OrderedDict
from typing import Any, Hashable, Optional, Tuple, Type

from pymediator.core import (
    Command,
    NextHandler,
    PipelineBehavior,
    Query,
    RequestTimeoutError,
    RetryableError,
)


logger = logging.getLogger(__name__)


class LoggingBehavior(PipelineBehavior):
    """
    Logs request execution for debugging and monitoring.

    Logs:
    - Start and completion (with elapsed time) at DEBUG
    - Failure with exception details at ERROR
    - Re-raises exceptions to preserve error handling
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self._logger = log or logger

    async def handle(self, request: Any, next_handler: NextHandler):
        """
        Log request execution around the rest of the pipeline.

        Raises:
            Re-raises any exception from handler after logging
        """
        request_name = type(request).__name__
        self._logger.debug(f"Handling {request_name}")
        started = time.perf_counter()

        try:
            response = await next_handler()
        except Exception as e:
            self._logger.error(f"Failed executing {request_name}: {e}", exc_info=True)
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        self._logger.debug(f"Handled {request_name} in {elapsed_ms:.1f}ms")
        return response


class ValidationBehavior(PipelineBehavior):
    """
    Validates requests before handler execution.

    If the request has a validate() method, calls it.
    This allows requests to define their own validation logic.
    """

    async def handle(self, request: Any, next_handler: NextHandler):
        """
        Validate request if it has validate() method.

        Raises:
            ValidationError: If validation fails
        """
        if hasattr(request, 'validate') and callable(getattr(request, 'validate')):
            request.validate()

        return await next_handler()


class RetryBehavior(PipelineBehavior):
    """
    Re-invokes the rest of the pipeline when it fails with a retryable error.

    Every attempt runs the inner behaviors and the handler again. Errors not
    listed in retry_on propagate immediately; after the last attempt the final
    error is re-raised unchanged.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        retry_on: Tuple[Type[BaseException], ...] = (RetryableError,),
        delay: float = 0.0,
        backoff: float = 2.0
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if delay < 0:
            raise ValueError("delay cannot be negative")
        self.max_attempts = max_attempts
        self.retry_on = retry_on
        self.delay = delay
        self.backoff = backoff

    async def handle(self, request: Any, next_handler: NextHandler):
        request_name = type(request).__name__
        wait = self.delay

        for attempt in range(1, self.max_attempts + 1):
            try:
                return await next_handler()
            except self.retry_on as e:
                if attempt == self.max_attempts:
                    raise
                logger.warning(
                    f"Attempt {attempt}/{self.max_attempts} of {request_name} failed: {e}; retrying"
                )
                if wait > 0:
                    await asyncio.sleep(wait)
                    wait *= self.backoff


class TimeoutBehavior(PipelineBehavior):
    """
    Bounds the time the rest of the pipeline may take.

    On expiry the inner call is cancelled, which unwinds through every inner
    stage that already called its continuation, and RequestTimeoutError is
    raised in its place. Errors raised by the inner call itself, including
    its own TimeoutError, propagate unchanged.
    """

    def __init__(self, timeout_seconds: float):
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        self.timeout_seconds = timeout_seconds

    async def handle(self, request: Any, next_handler: NextHandler):
        request_name = type(request).__name__
        task = asyncio.ensure_future(next_handler())
        try:
            done, _ = await asyncio.wait({task}, timeout=self.timeout_seconds)
        except asyncio.CancelledError:
            task.cancel()
            await asyncio.wait({task})
            raise

        if task in done:
            return task.result()

        task.cancel()
        await asyncio.wait({task})
        logger.warning(f"{request_name} exceeded {self.timeout_seconds}s, cancelled")
        raise RequestTimeoutError(request_name, self.timeout_seconds)


class CachingBehavior(PipelineBehavior):
    """
    Serves repeated queries from memory without reaching the handler.

    Only hashable Query requests are cached (frozen dataclasses are). Any
    Command passing through clears the cache, since it may change what the
    queries would return. The cache is cleared again when the command
    finishes, and a query that overlapped a command does not store its
    response. Callers get their own copy of a cached response.
    Least recently used entries are evicted first.
    """

    def __init__(self, max_entries: int = 128):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._generation += 1
        self._entries.clear()

    async def handle(self, request: Any, next_handler: NextHandler):
        if isinstance(request, Command):
            self.clear()
            try:
                return await next_handler()
            finally:
                self.clear()

        key = _cache_key(request)
        if key is None:
            return await next_handler()

        if key in self._entries:
            self._entries.move_to_end(key)
            logger.debug(f"Cache hit for {type(request).__name__}")
            return copy.deepcopy(self._entries[key])

        generation = self._generation
        response = await next_handler()
        if generation != self._generation:
            logger.debug(f"Cache cleared while {type(request).__name__} ran, not storing")
            return response

        self._entries[key] = copy.deepcopy(response)
        if len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
        return response


def _cache_key(request: Any) -> Optional[Hashable]:
    if not isinstance(request, Query):
        return None
    try:
        hash(request)
    except TypeError:
        return None
    return (type(request), request)
