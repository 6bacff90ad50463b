"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credit_ledger.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_ledger.api.v1 import accounts, transactions, payments, paid_months, summary, reports, wishlist
from credit_ledger.infrastructure.database.models import Base
from credit_ledger.infrastructure.database.session import engine
from credit_ledger.infrastructure.observability.logging import setup_logging
from credit_ledger.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Credit Ledger",
        description="Installment projection and credit availability service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(accounts.router, prefix="/v1", tags=["accounts"])
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(payments.router, prefix="/v1", tags=["payments"])
    app.include_router(paid_months.router, prefix="/v1", tags=["paid-months"])
    app.include_router(summary.router, prefix="/v1", tags=["summary"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])
    app.include_router(wishlist.router, prefix="/v1", tags=["wishlist"])

    return app


app = create_app()
