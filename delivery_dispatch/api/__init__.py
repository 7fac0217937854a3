"""API routers package initialization."""

from delivery_dispatch.api.catalog import router as catalog_router
from delivery_dispatch.api.deliveries import router as deliveries_router
from delivery_dispatch.api.reports import router as reports_router

__all__ = [
    "catalog_router",
    "deliveries_router",
    "reports_router",
]
