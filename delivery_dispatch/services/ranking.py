"""
Driver distance ranking.
Aggregates delivery history into per-driver total distance, highest first.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from delivery_dispatch.models import City, Driver
from delivery_dispatch.repository import DispatchRepository


@dataclass(frozen=True)
class DriverDistance:
    """One line of the rank report."""
    driver: Driver
    total_distance: int  # whole km


class RankingAggregator:
    """Builds rank reports, globally or for the drivers of one city."""

    def __init__(self, repository: DispatchRepository):
        self.repository = repository

    async def rank(self, city: Optional[City] = None) -> List[DriverDistance]:
        """
        Rank drivers by total distance traveled, descending.
        
        Each delivery's distance is truncated to whole kilometers before it
        is summed. Drivers without deliveries are listed with 0. Ties keep
        identity order.
        
        Args:
            city: Restrict the report to drivers based in this city
        
        Returns:
            Report lines sorted by total_distance descending
        """
        if city is None:
            drivers = await self.repository.find_all_drivers()
        else:
            drivers = await self.repository.find_drivers_by_city(city)
        
        distances = await self.repository.find_distances_for_drivers(d.id for d in drivers)
        
        totals: Dict[int, int] = defaultdict(int)
        for driver_id, distance in distances:
            totals[driver_id] += int(distance)
        
        report = [DriverDistance(driver=d, total_distance=totals[d.id]) for d in drivers]
        report.sort(key=lambda line: line.total_distance, reverse=True)
        return report
