"""
Pydantic schemas for the catalog API.
Cities, drivers, customers and restaurants are created and looked up by name.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CityCreate(BaseModel):
    """Request schema for registering a city."""
    name: str = Field(..., min_length=1, max_length=255)


class CityResponse(BaseModel):
    id: int
    name: str
    
    model_config = {"from_attributes": True}


class DriverCreate(BaseModel):
    """Request schema for registering a driver in a city."""
    name: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, description="Home city name")


class DriverResponse(BaseModel):
    id: int
    name: str
    city: str


class CustomerCreate(BaseModel):
    """Request schema for registering a customer."""
    name: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, description="Home city name")
    address: Optional[str] = None


class CustomerResponse(BaseModel):
    id: int
    name: str
    city: str
    address: Optional[str] = None


class RestaurantCreate(BaseModel):
    """Request schema for registering a restaurant."""
    name: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, description="City name")
    description: Optional[str] = None


class RestaurantResponse(BaseModel):
    id: int
    name: str
    city: str
    description: Optional[str] = None
