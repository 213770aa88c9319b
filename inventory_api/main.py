"""
Inventory API

This module implements a FastAPI application for an e-commerce inventory
domain with full CRUD operations on four resources: inventory items,
suppliers, shipments and transactions. Records are persisted as documents in
a SQL database through SQLAlchemy.

Endpoints:
    POST /api/auth/token: Exchange API credentials for a bearer token
    /api/inventory, /api/supplier, /api/shipment, /api/transaction:
        POST, GET, GET /{id}, PUT /{id}, DELETE /{id} (bearer token required)
    GET /healthz: Health check endpoint for orchestration systems

Attributes:
    app (FastAPI): The application instance configured from environment variables
"""
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from . import __version__, auth, config
from .database import Database
from .errors import register_exception_handlers
from .routes import build_routers

logger = logging.getLogger(__name__)

SERVICE_NAME = "inventory-api"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all requests and responses.
    Adds a request ID header and tracks request duration.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        logger.info(f"Request started: {request.method} {request.url.path} [{request_id}]")

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path} [{request_id}] after {duration_ms:.1f}ms",
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"{response.status_code} in {duration_ms:.1f}ms [{request_id}]"
        )
        response.headers["X-Request-ID"] = request_id
        return response


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database_url: SQLAlchemy URL to use instead of ``config.DATABASE_URL``

    Returns:
        Configured FastAPI application. The database is opened when the
        application starts and disposed when it shuts down.
    """
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {SERVICE_NAME}")
        database = Database(database_url or config.DATABASE_URL)
        database.create_all()
        app.state.database = database
        logger.info(f"{SERVICE_NAME} started successfully")

        yield

        logger.info(f"Shutting down {SERVICE_NAME}")
        database.dispose()

    app = FastAPI(
        title=SERVICE_NAME,
        description="E-commerce inventory API",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/healthz", response_model=dict)
    def health():
        """
        Health check endpoint for the inventory API.

        Returns:
            dict: {"status": "healthy"} when the service is operational.
        """
        return {"status": "healthy"}

    app.include_router(auth.router)
    for router in build_routers():
        app.include_router(router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
