"""
Dispatch service - the two operations exposed to API and batch callers.
"""

from datetime import datetime
from typing import List, Optional

from delivery_dispatch.models import City, Customer, Restaurant, Delivery
from delivery_dispatch.repository import DispatchRepository
from delivery_dispatch.services.assignment import AssignmentCoordinator
from delivery_dispatch.services.distance import DistanceSampler
from delivery_dispatch.services.ranking import RankingAggregator, DriverDistance


class DispatchService:
    """Facade over assignment and ranking for one database session."""

    def __init__(self, repository: DispatchRepository, sampler: Optional[DistanceSampler] = None):
        self.repository = repository
        self.coordinator = AssignmentCoordinator(repository, sampler=sampler)
        self.ranking = RankingAggregator(repository)

    async def create_order_and_assign_driver(
        self,
        customer: Optional[Customer],
        restaurant: Optional[Restaurant],
        delivery_time: Optional[datetime],
    ) -> Delivery:
        return await self.coordinator.assign(customer, restaurant, delivery_time)

    async def get_driver_rank_report(self, city: Optional[City] = None) -> List[DriverDistance]:
        return await self.ranking.rank(city)
