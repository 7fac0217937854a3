"""
Eligibility filter.
Finds drivers in a city that are free at an exact delivery timestamp.
"""

import logging
from datetime import datetime
from typing import List

from delivery_dispatch.models import City, Driver
from delivery_dispatch.repository import DispatchRepository

logger = logging.getLogger(__name__)


class EligibilityFilter:
    """
    A driver is eligible when they are based in the requested city and
    have no delivery at exactly the requested time. Deliveries at other
    timestamps never conflict, however close they are.
    """

    def __init__(self, repository: DispatchRepository):
        self.repository = repository

    async def eligible(self, city: City, requested_time: datetime) -> List[Driver]:
        """
        Return the free drivers of `city`, in identity order.
        
        Args:
            city: City the delivery takes place in
            requested_time: Exact delivery timestamp (naive UTC)
        
        Returns:
            Eligible drivers; empty when everyone is booked
        """
        drivers = await self.repository.find_drivers_by_city(city)
        booked = await self.repository.find_booked_driver_ids(requested_time)
        
        eligible = [driver for driver in drivers if driver.id not in booked]
        
        logger.debug(
            f"{len(eligible)}/{len(drivers)} drivers free in {city.name} at {requested_time.isoformat()}"
        )
        return eligible
