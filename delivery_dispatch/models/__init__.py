"""Models package initialization - imports all models for easy access."""

from delivery_dispatch.models.city import City
from delivery_dispatch.models.customer import Customer
from delivery_dispatch.models.driver import Driver
from delivery_dispatch.models.restaurant import Restaurant
from delivery_dispatch.models.delivery import Delivery

__all__ = [
    "City",
    "Customer",
    "Driver",
    "Restaurant",
    "Delivery",
]
