from __future__ import annotations

import logging
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Type

from app.core.cqrs import Request, RequestHandler
from app.core.exceptions import HandlerNotFoundError

logger = logging.getLogger(__name__)

Next = Callable[[], Awaitable[Any]]


class HandlerRegistry:
    """
    Explicit request type -> handler class mapping. One handler per type;
    registering a second one for the same type is a programming error.
    """

    def __init__(self):
        self._handlers: Dict[Type[Request], Type[RequestHandler]] = {}

    def register(self, request_type: Type[Request], handler_type: Type[RequestHandler]) -> None:
        existing = self._handlers.get(request_type)
        if existing is not None and existing is not handler_type:
            raise ValueError(
                f"{request_type.__name__} already handled by {existing.__name__}"
            )
        self._handlers[request_type] = handler_type

    def resolve(self, request_type: Type[Request]) -> Type[RequestHandler]:
        try:
            return self._handlers[request_type]
        except KeyError:
            raise HandlerNotFoundError(f"No handler registered for {request_type.__name__}") from None

    def __contains__(self, request_type: object) -> bool:
        return request_type in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


class PipelineBehavior:
    """Wraps every send; call `next_` to continue down the pipeline."""

    async def __call__(self, request: Request, next_: Next) -> Any:
        return await next_()


class LoggingBehavior(PipelineBehavior):
    def __init__(self, slow_threshold_seconds: float = 3.0):
        self.slow_threshold_seconds = slow_threshold_seconds

    async def __call__(self, request: Request, next_: Next) -> Any:
        name = type(request).__name__
        logger.info("[START] Handle request=%s - RequestData=%r", name, request)
        started = time.perf_counter()
        response = await next_()
        elapsed = time.perf_counter() - started
        if elapsed > self.slow_threshold_seconds:
            logger.warning("[PERFORMANCE] The request %s took %.3f seconds.", name, elapsed)
        logger.info("[END] Handled %s with %s", name, type(response).__name__)
        return response


class Mediator:
    """
    Sends a command/query to the single handler registered for its runtime
    type. Handlers are instantiated per send with the mediator's session.

    Usage:
      mediator = Mediator(registry, session, behaviors=[LoggingBehavior()])
      result = await mediator.send(CreateProductCommand(...))
    """

    def __init__(self, registry: HandlerRegistry, session: Any,
                 behaviors: Optional[Sequence[PipelineBehavior]] = None):
        self.registry = registry
        self.session = session
        self.behaviors: List[PipelineBehavior] = list(behaviors or [])

    async def send(self, request: Request) -> Any:
        handler = self.registry.resolve(type(request))(self.session)

        async def invoke() -> Any:
            return await handler.handle(request)

        pipeline: Next = invoke
        for behavior in reversed(self.behaviors):
            pipeline = _bind(behavior, request, pipeline)
        return await pipeline()


def _bind(behavior: PipelineBehavior, request: Request, next_: Next) -> Next:
    async def step() -> Any:
        return await behavior(request, next_)
    return step
