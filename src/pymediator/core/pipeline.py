"""Composition of pipeline behaviors around a terminal handler call."""
from typing import Any, Sequence

from .requests import NextHandler, PipelineBehavior


def build_pipeline(
    behaviors: Sequence[PipelineBehavior],
    request: Any,
    terminal: NextHandler
) -> NextHandler:
    """
    Nest behaviors around the terminal call.

    Folds from the terminal outward so the first behavior in the sequence is
    the outermost wrapper: it sees the request first and the response last.
    How often each behavior calls its continuation is left to the behavior.

    Args:
        behaviors: Behaviors in execution order (outermost first)
        request: The request every stage receives
        terminal: Zero-argument coroutine function invoking the handler

    Returns:
        Zero-argument coroutine function running the whole chain
    """
    pipeline = terminal
    for behavior in reversed(behaviors):
        pipeline = _wrap(behavior, request, pipeline)
    return pipeline


def _wrap(behavior: PipelineBehavior, request: Any, next_handler: NextHandler) -> NextHandler:
    # A separate function binds behavior/next_handler per stage (no late binding)
    async def _next():
        return await behavior.handle(request, next_handler)

    return _next
