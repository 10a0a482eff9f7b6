import logging
import re
import time
import uuid

from fastapi import FastAPI, Request

from app.api.error_handlers import internal_error_response

logger = logging.getLogger(__name__)

REQUEST_ID_RE = re.compile(r"[A-Za-z0-9-]{1,128}")


def _request_id(request: Request) -> str:
    # reuse a well-formed caller-supplied id so logs line up across services
    supplied = request.headers.get("X-Request-ID", "")
    if REQUEST_ID_RE.fullmatch(supplied):
        return supplied
    return uuid.uuid4().hex


def add_security_headers(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers_mw(request: Request, call_next):
        request_id = _request_id(request)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # 500s are built here so they carry the same headers as everything else
            response = internal_error_response(request, exc)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer-when-downgrade"
        logger.info(
            "%s %s -> %d (%.1f ms) [%s]",
            request.method, request.url.path, response.status_code, elapsed_ms, request_id,
        )
        return response
