from __future__ import annotations
from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """
    Base class for errors that map onto an HTTP problem response.
    Subclasses set `status_code` and `title`; see app/api/error_handlers.py.
    """
    status_code: int = 500
    title: str = "Internal Server Error"

    def __init__(self, detail: str = "", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(detail)
        self.detail = detail
        self.errors = list(errors or [])


class NotFoundError(CatalogError):
    status_code = 404
    title = "Not Found"

    def __init__(self, name: str, key: Any):
        super().__init__(f'Entity "{name}" ({key}) was not found.')
        self.name = name
        self.key = key


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: Any):
        super().__init__("Product", product_id)


class HandlerNotFoundError(LookupError):
    pass


class DocumentStoreError(Exception):
    pass
