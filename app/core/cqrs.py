"""
Command / query building blocks.

Commands change stored data, queries only read it. Both are plain frozen
dataclasses deriving from the markers below; each one is served by exactly
one handler registered with the mediator (see app/core/mediator.py).
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

TResponse = TypeVar("TResponse")
TRequest = TypeVar("TRequest")


class Request(Generic[TResponse]):
    """Anything the mediator can send."""


class Command(Request[TResponse]):
    pass


class Query(Request[TResponse]):
    pass


class RequestHandler(Generic[TRequest, TResponse]):
    """
    Handlers are built per request with the request-scoped document session.
    """

    def __init__(self, session: Any):
        self.session = session

    async def handle(self, request: TRequest) -> TResponse:
        raise NotImplementedError


class CommandHandler(RequestHandler[TRequest, TResponse]):
    pass


class QueryHandler(RequestHandler[TRequest, TResponse]):
    pass
