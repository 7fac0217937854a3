"""Schemas package initialization."""

from delivery_dispatch.schemas.catalog import (
    CityCreate,
    CityResponse,
    DriverCreate,
    DriverResponse,
    CustomerCreate,
    CustomerResponse,
    RestaurantCreate,
    RestaurantResponse,
)
from delivery_dispatch.schemas.delivery import (
    DeliveryCreateRequest,
    DeliveryResponse,
    DriverDistanceResponse,
    DriverRankReportResponse,
)

__all__ = [
    "CityCreate",
    "CityResponse",
    "DriverCreate",
    "DriverResponse",
    "CustomerCreate",
    "CustomerResponse",
    "RestaurantCreate",
    "RestaurantResponse",
    "DeliveryCreateRequest",
    "DeliveryResponse",
    "DriverDistanceResponse",
    "DriverRankReportResponse",
]
