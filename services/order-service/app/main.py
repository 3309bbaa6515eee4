"""
Order Service - Main Application.

Records custom-apparel orders, prices them from a mutable pricing
configuration and serves dashboard statistics. All state lives in one
JSON document managed by DocumentStore.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .dependencies import init_services, reset_services
from .domain.exceptions import (
    InvalidInputException,
    OrderNotFoundException,
    OrderServiceException,
    StorageException,
)
from .logging_config import setup_logging
from .metrics import metrics_endpoint, track_request_metrics
from .metrics_middleware import PrometheusMiddleware
from .middleware import RequestLoggingMiddleware
from .repositories.document_store import DocumentStore
from .routers import config_router, health_router, orders_router, settings_router, stats_router

setup_logging(
    log_level=settings.LOG_LEVEL,
    service_name=settings.SERVICE_NAME,
    use_json=settings.LOG_JSON,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    A store that cannot be initialized aborts startup.
    """
    logger.info("Starting Order Service", version=settings.SERVICE_VERSION)

    store = DocumentStore(settings.DB_PATH)
    try:
        store.initialize()
    except StorageException as e:
        logger.critical("Failed to initialize document store", error=e.message)
        raise

    init_services(store)
    app.state.store = store

    logger.info(
        "Order Service started",
        port=settings.SERVICE_PORT,
        db_path=str(settings.DB_PATH),
        environment=settings.ENVIRONMENT,
    )

    yield

    logger.info("Shutting down Order Service")
    reset_services()


app = FastAPI(
    title="Order Service",
    description="Custom-apparel orders, pricing configuration and statistics",
    version=settings.SERVICE_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)
app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(InvalidInputException)
async def invalid_input_handler(request: Request, exc: InvalidInputException):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message}
    )


@app.exception_handler(OrderNotFoundException)
async def not_found_handler(request: Request, exc: OrderNotFoundException):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message}
    )


@app.exception_handler(OrderServiceException)
async def service_exception_handler(request: Request, exc: OrderServiceException):
    """Storage and other service failures not handled by a router."""
    logger.error(
        "Service error",
        path=request.url.path,
        method=request.method,
        error=exc.message,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Something went wrong!"},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Malformed request body", path=request.url.path, errors=exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid JSON payload"}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Something went wrong!"},
    )


app.include_router(orders_router.router)
app.include_router(config_router.router)
app.include_router(settings_router.router)
app.include_router(stats_router.router)
app.include_router(health_router.router)


@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()


@app.get("/", include_in_schema=False)
async def index():
    """Serve the frontend entry page if one is installed."""
    index_path = settings.PUBLIC_DIR / "index.html"
    if index_path.is_file():
        return FileResponse(index_path)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"error": "Frontend not found"}
    )


# Mounted last so API routes take precedence over static files
if settings.PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR), name="public")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
