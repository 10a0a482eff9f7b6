# app/api/deps.py
from typing import AsyncIterator

from fastapi import Depends

from app.config import settings
from app.core.mediator import HandlerRegistry, LoggingBehavior, Mediator
from app.database import DocumentSession, DocumentStore, store
from app.services.products import register_product_handlers

# built once at import; handler classes are stateless until instantiated per send
registry = register_product_handlers(HandlerRegistry())


def get_store() -> DocumentStore:
    """
    Dependency that returns the document store.
    Tests override it through app.dependency_overrides.
    """
    return store


async def get_session(doc_store: DocumentStore = Depends(get_store)) -> AsyncIterator[DocumentSession]:
    """
    One session per request. Changes a handler staged but never saved are
    dropped when the request ends.
    """
    session = doc_store.open_session()
    yield session


def get_sender(session: DocumentSession = Depends(get_session)) -> Mediator:
    return Mediator(
        registry,
        session,
        behaviors=[LoggingBehavior(settings.SLOW_REQUEST_THRESHOLD_SECONDS)],
    )
