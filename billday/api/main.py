"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from billday.api.middleware import RequestIDMiddleware, MetricsMiddleware
from billday.api.v1 import dashboard, due_bills, due_dates, due_expenses, reminders
from billday.infrastructure.observability.logging import setup_logging
from billday.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Billday",
        description="Recurring bill due-date resolution and reminder service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(due_dates.router, prefix="/v1", tags=["due-dates"])
    app.include_router(due_bills.router, prefix="/v1", tags=["due-bills"])
    app.include_router(due_expenses.router, prefix="/v1", tags=["due-expenses"])
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])
    app.include_router(reminders.router, prefix="/v1", tags=["reminders"])

    return app


app = create_app()
