"""
Pydantic schemas for delivery assignment and rank reports.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from delivery_dispatch.schemas.catalog import DriverResponse, CustomerResponse, RestaurantResponse


class DeliveryCreateRequest(BaseModel):
    """
    Request schema for POST /api/v1/deliveries.
    
    A missing field is passed through as None and rejected by the
    coordinator as an invalid parameter (400).
    """
    customer_id: Optional[int] = None
    restaurant_id: Optional[int] = None
    delivery_time: Optional[datetime] = Field(None, description="Exact delivery timestamp")


class DeliveryResponse(BaseModel):
    """A delivery with its assigned driver."""
    id: int
    driver: DriverResponse
    restaurant: RestaurantResponse
    customer: CustomerResponse
    delivery_time: datetime
    distance: float = Field(..., ge=0, description="Distance in km")
    created_at: datetime


class DriverDistanceResponse(BaseModel):
    """One line of the driver rank report."""
    driver: DriverResponse
    total_distance: int = Field(..., ge=0, description="Total whole km")


class DriverRankReportResponse(BaseModel):
    """Response schema for GET /api/v1/reports/driver-rank."""
    city: Optional[str] = None
    drivers: List[DriverDistanceResponse] = Field(default_factory=list)
