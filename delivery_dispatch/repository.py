"""
Data-access layer for the dispatch core.
Wraps an AsyncSession with the find/save queries the services need.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set, Tuple, TypeVar

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from delivery_dispatch.database import Base
from delivery_dispatch.models import City, Customer, Driver, Restaurant, Delivery

EntityT = TypeVar("EntityT", bound=Base)


class DispatchRepository:
    """
    Persistence collaborator for assignment and ranking.

    Drivers are always returned in identity order, which is the order
    the load balancer and the ranking report fall back to on ties.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    # ---------- Drivers ----------

    async def find_all_drivers(self) -> List[Driver]:
        result = await self.db.execute(select(Driver).order_by(Driver.id))
        return list(result.scalars().all())

    async def find_drivers_by_city(self, city: City) -> List[Driver]:
        result = await self.db.execute(
            select(Driver)
            .where(Driver.city_id == city.id)
            .order_by(Driver.id)
        )
        return list(result.scalars().all())

    # ---------- Deliveries ----------

    async def find_all_deliveries(self) -> List[Delivery]:
        result = await self.db.execute(select(Delivery).order_by(Delivery.id))
        return list(result.scalars().all())

    async def find_booked_driver_ids(self, delivery_time: datetime) -> Set[int]:
        """IDs of drivers holding a delivery at exactly `delivery_time`."""
        result = await self.db.execute(
            select(Delivery.driver_id).where(Delivery.delivery_time == delivery_time)
        )
        return set(result.scalars().all())

    async def count_deliveries_by_driver(self, driver_ids: Iterable[int]) -> Dict[int, int]:
        """Historical delivery count per driver. Drivers without deliveries are absent."""
        ids = list(driver_ids)
        if not ids:
            return {}
        result = await self.db.execute(
            select(Delivery.driver_id, func.count(Delivery.id))
            .where(Delivery.driver_id.in_(ids))
            .group_by(Delivery.driver_id)
        )
        return {driver_id: count for driver_id, count in result.all()}

    async def find_distances_for_drivers(self, driver_ids: Iterable[int]) -> List[Tuple[int, float]]:
        """(driver_id, distance) for every delivery of the given drivers."""
        ids = list(driver_ids)
        if not ids:
            return []
        result = await self.db.execute(
            select(Delivery.driver_id, Delivery.distance)
            .where(Delivery.driver_id.in_(ids))
            .order_by(Delivery.id)
        )
        return [(driver_id, distance) for driver_id, distance in result.all()]

    async def get_delivery(self, delivery_id: int) -> Optional[Delivery]:
        return await self.db.get(Delivery, delivery_id)

    async def save_delivery(self, delivery: Delivery) -> Delivery:
        """Persist a new delivery and commit so its identity is assigned."""
        self.db.add(delivery)
        await self.db.commit()
        return delivery

    async def rollback(self) -> None:
        await self.db.rollback()

    # ---------- Catalog ----------

    async def find_all_cities(self) -> List[City]:
        result = await self.db.execute(select(City).order_by(City.id))
        return list(result.scalars().all())

    async def add(self, entity: EntityT) -> EntityT:
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def get_customer(self, customer_id: int) -> Optional[Customer]:
        return await self.db.get(Customer, customer_id)

    async def get_restaurant(self, restaurant_id: int) -> Optional[Restaurant]:
        return await self.db.get(Restaurant, restaurant_id)

    async def find_city_by_name(self, name: str) -> Optional[City]:
        return await self._find_by_name(City, name)

    async def find_customer_by_name(self, name: str) -> Optional[Customer]:
        return await self._find_by_name(Customer, name)

    async def find_driver_by_name(self, name: str) -> Optional[Driver]:
        return await self._find_by_name(Driver, name)

    async def find_restaurant_by_name(self, name: str) -> Optional[Restaurant]:
        return await self._find_by_name(Restaurant, name)

    async def _find_by_name(self, model, name: str):
        result = await self.db.execute(select(model).where(model.name == name))
        return result.scalar_one_or_none()
