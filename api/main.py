"""
Order Lifecycle API - Main FastAPI Application.

Hosts both protocol front-ends over the same use cases:
- REST/JSON under /api/orders
- JSON-RPC 2.0 under /rpc
"""
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies import close_storage, init_storage
from api.routes import health, orders, rpc
from core.application.dtos.order_dto import OrderDTO
from core.domain.exceptions import (
    NotificationDeliveryError,
    OrderDomainError,
    OrderNotFoundError,
)
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


logger = logging.getLogger(__name__)


# =============================================================================
# STARTUP/SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and storage for the lifetime of the app."""
    settings = get_app_settings()
    configure_logging(settings.service.log_level)
    logger.info(f"🚀 {settings.service.app_name} starting up...")
    await init_storage()
    yield
    await close_storage()
    logger.info(f"👋 {settings.service.app_name} shutting down...")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Order Lifecycle API",
    description="""
    Order creation, retrieval and status transitions.

    The same use cases are exposed through:
    - REST (JSON) at /api/orders
    - JSON-RPC 2.0 at /rpc
    """,
    version="1.0.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()
    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(OrderDomainError)
async def order_domain_error_handler(request: Request, exc: OrderDomainError) -> JSONResponse:
    """Invalid command, item, status or transition."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.exception_handler(OrderNotFoundError)
async def order_not_found_handler(request: Request, exc: OrderNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.exception_handler(NotificationDeliveryError)
async def notification_error_handler(request: Request, exc: NotificationDeliveryError) -> JSONResponse:
    """The order was saved but the customer could not be notified."""
    content = {"detail": str(exc), "error": type(exc).__name__}
    if exc.order is not None:
        content["order"] = OrderDTO.from_domain(exc.order).model_dump(mode="json")
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "path": request.url.path},
    )


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(rpc.router, prefix="/rpc", tags=["RPC"])


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Order Lifecycle API",
        "docs": "/docs",
        "endpoints": [
            "POST /api/orders",
            "GET /api/orders",
            "GET /api/orders/{order_id}",
            "PATCH /api/orders/{order_id}/status",
            "POST /rpc",
        ],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
