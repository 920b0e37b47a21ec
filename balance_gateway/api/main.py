"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from balance_gateway.api.middleware import RequestContextMiddleware
from balance_gateway.api.routes import balance
from balance_gateway.api.schemas import HealthResponse
from balance_gateway.api.validation import validation_exception_handler
from balance_gateway.config import settings
from balance_gateway.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Service starting", extra={"service": settings.service_name, "port": settings.port})
    yield
    logger.info("Service stopped", extra={"service": settings.service_name})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Account Balance Calculation API",
        description="Calculates account balances with precise decimal arithmetic",
        version="1.0.0",
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)

    # Malformed requests are rejected with 400 and every violated field
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    def health_check():
        return HealthResponse(status="ok")

    # Prometheus metrics endpoint
    @app.get("/metrics", include_in_schema=False)
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(balance.router, tags=["balance"])

    return app


app = create_app()
