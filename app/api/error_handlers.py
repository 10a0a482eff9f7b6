"""
Global exception handlers. Every error response is a problem-details body
(`application/problem+json`) with title, status, detail and instance.

- CatalogError -> its own status (404 for missing products)
- RequestValidationError -> 400 with per-field errors
- HTTPException raised by the framework (unknown route, 405) -> its status
- Exception (catch-all) -> 500, never leaks internal details
"""

import logging
from http import HTTPStatus
from typing import Any, Dict, List, Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import CatalogError

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"


def problem_response(request: Request, status_code: int, title: str, detail: str,
                     errors: Optional[List[Dict[str, Any]]] = None,
                     headers: Optional[Mapping[str, str]] = None) -> JSONResponse:
    body: Dict[str, Any] = {
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
    }
    if errors:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body, media_type=PROBLEM_JSON,
                        headers=dict(headers) if headers else None)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred.",
    )


def _status_title(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.detail)
        return problem_response(request, exc.status_code, exc.title, exc.detail, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
            }
            for e in exc.errors()
        ]
        logger.warning("Validation error on %s: %s", request.url.path, errors)
        return problem_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Bad Request",
            "One or more validation errors occurred.",
            errors,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info("HTTP %d on %s %s", exc.status_code, request.method, request.url.path)
        return problem_response(
            request,
            exc.status_code,
            _status_title(exc.status_code),
            str(exc.detail),
            headers=exc.headers,
        )

    # only reached for errors raised outside the http middleware
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return internal_error_response(request, exc)
