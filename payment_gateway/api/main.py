"""FastAPI application factory"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from payment_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from payment_gateway.api.v1 import payments
from payment_gateway.infrastructure.observability.logging import setup_logging
from payment_gateway.infrastructure.storage.repositories import InMemoryPaymentRepository
from payment_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed payment bodies are caller errors: 400, not FastAPI's default 422"""
    errors = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": errors})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Payment Gateway",
        description="Card payment authorization and retrieval service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # One store per application instance, shared by all requests
    app.state.payment_repository = InMemoryPaymentRepository()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(payments.router, prefix="/v1", tags=["payments"])

    return app


app = create_app()
