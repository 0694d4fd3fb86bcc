"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from ledger_insights.api.middleware import MetricsMiddleware, RequestIDMiddleware
from ledger_insights.api.v1 import analysis, coach, subscriptions
from ledger_insights.config import settings
from ledger_insights.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Ledger Insights",
        description="Income, spending, cash flow and subscription analysis",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(analysis.router, prefix="/v1", tags=["analysis"])
    app.include_router(subscriptions.router, prefix="/v1", tags=["subscriptions"])
    app.include_router(coach.router, prefix="/v1", tags=["coach"])

    return app


app = create_app()
