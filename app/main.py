# app/main.py
from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager

from fastapi.concurrency import run_in_threadpool

from app.config import settings
from app.core.logging import configure_logging
from app.database import store
from app.api.error_handlers import register_error_handlers
from app.api.routes import products as product_routes
from app.middleware.cors_config import configure_cors
from app.middleware.security_headers import add_security_headers
from app.services.seed import seed_initial_products


configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context: prepare the data directory and, when enabled, seed the
    initial catalog before the app starts serving.
    """
    # --- startup logic ---
    store.data_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Document store at %s (env=%s)", store.data_dir, settings.ENV)
    if settings.SEED_INITIAL_DATA:
        await run_in_threadpool(seed_initial_products, store)

    yield
    # --- shutdown logic ---
    logger.info("Shutting down %s", settings.SERVICE_NAME)


app = FastAPI(title=settings.SERVICE_NAME, version="0.1.0", lifespan=lifespan)
configure_cors(app)
add_security_headers(app)
register_error_handlers(app)

app.include_router(product_routes.router)


@app.get("/", tags=["root"])
async def root():
    return {"status": "ok", "service": settings.SERVICE_NAME}


@app.get("/health", tags=["root"])
async def health():
    return {"status": "ok"}
