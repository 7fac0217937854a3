"""
Delivery Dispatch - FastAPI Application
Main entry point for the API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from delivery_dispatch.config import get_settings
from delivery_dispatch.api import catalog_router, deliveries_router, reports_router
from delivery_dispatch.core.exceptions import (
    DispatchError,
    InvalidArgumentError,
    CityMismatchError,
    NoAvailableDriverError,
)


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("delivery_dispatch")

ERROR_STATUS = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    CityMismatchError: status.HTTP_400_BAD_REQUEST,
    NoAvailableDriverError: status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    logger.info(f"Starting {settings.app_title} v{settings.app_version}")
    
    from delivery_dispatch.database import init_db
    await init_db()
    logger.info("Database tables initialized")
    
    yield
    # Shutdown
    logger.info("Shutting down...")


# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="""
    ## Delivery Dispatch API
    
    Assigns drivers to food-delivery orders and ranks drivers by distance.
    
    ### Main Endpoints
    - `POST /api/v1/deliveries` - Create an order and assign the least busy free driver
    - `GET /api/v1/reports/driver-rank` - Drivers by total distance, optionally per city
    - `POST /api/v1/cities`, `/drivers`, `/customers`, `/restaurants` - Catalog
    """,
    lifespan=lifespan,
)


@app.exception_handler(DispatchError)
async def dispatch_error_handler(request: Request, exc: DispatchError) -> JSONResponse:
    """Translate assignment failures into HTTP errors."""
    return JSONResponse(
        status_code=ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST),
        content={"detail": exc.message},
    )


# Include API routers
app.include_router(catalog_router, prefix=settings.api_prefix)
app.include_router(deliveries_router, prefix=settings.api_prefix)
app.include_router(reports_router, prefix=settings.api_prefix)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
