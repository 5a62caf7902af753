"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finaurora_gateway.api.errors import register_exception_handlers
from finaurora_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finaurora_gateway.api.v1 import evaluation, installment
from finaurora_gateway.infrastructure.observability.logging import setup_logging
from finaurora_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinAurora Credit Gateway",
        description="Loan installment and credit approval service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # InvalidArgumentError → 422, anything else → logged 500
    register_exception_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(installment.router, prefix="/v1", tags=["installments"])
    app.include_router(evaluation.router, prefix="/v1", tags=["evaluations"])

    return app


app = create_app()
