"""
Assignment coordinator.
Validates an order, picks the least busy free driver in the order's city,
samples a distance and persists exactly one delivery.
"""

import asyncio
import logging
import weakref
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError

from delivery_dispatch.core.exceptions import (
    InvalidArgumentError,
    CityMismatchError,
    NoAvailableDriverError,
)
from delivery_dispatch.models import Customer, Restaurant, Delivery
from delivery_dispatch.repository import DispatchRepository
from delivery_dispatch.services.distance import DistanceSampler, UniformDistanceSampler
from delivery_dispatch.services.eligibility import EligibilityFilter
from delivery_dispatch.services.load_balancer import LoadBalancer

logger = logging.getLogger(__name__)

# One lock per event loop, shared by every coordinator in the process
_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = weakref.WeakKeyDictionary()


def get_assignment_lock() -> asyncio.Lock:
    """Process-wide lock serializing the check-then-create sequence."""
    loop = asyncio.get_running_loop()
    lock = _locks.get(loop)
    if lock is None:
        lock = asyncio.Lock()
        _locks[loop] = lock
    return lock


def to_naive_utc(value: datetime) -> datetime:
    """Deliveries are stored and compared as naive UTC timestamps."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _city_key(entity):
    """
    Identify an entity's city whether or not it has been flushed.
    
    Unflushed entities have no city_id yet, so the related City is used:
    its id once it has one, otherwise the object itself.
    """
    city = entity.city
    if city is not None:
        return city.id if city.id is not None else city
    return entity.city_id


class AssignmentCoordinator:
    """
    Creates deliveries. This is the only code path that builds a Delivery.
    
    The validate -> filter -> choose -> persist sequence runs under a single
    lock, so two concurrent requests for the same city and time cannot both
    book the same driver. The unique (driver_id, delivery_time) constraint
    covers writers in other processes.
    """

    def __init__(
        self,
        repository: DispatchRepository,
        sampler: Optional[DistanceSampler] = None,
        lock: Optional[asyncio.Lock] = None,
    ):
        self.repository = repository
        self.sampler = sampler or UniformDistanceSampler()
        self.eligibility = EligibilityFilter(repository)
        self.load_balancer = LoadBalancer(repository)
        self._lock = lock

    async def assign(
        self,
        customer: Optional[Customer],
        restaurant: Optional[Restaurant],
        requested_time: Optional[datetime],
    ) -> Delivery:
        """
        Assign a driver to a new order.
        
        Args:
            customer: Ordering customer
            restaurant: Restaurant preparing the order
            requested_time: Exact delivery timestamp
        
        Returns:
            The persisted delivery
        
        Raises:
            InvalidArgumentError: A parameter is missing
            CityMismatchError: Customer and restaurant are in different cities
            NoAvailableDriverError: Every driver in the city is booked at that time
        """
        if customer is None or restaurant is None or not isinstance(requested_time, datetime):
            logger.warning("Rejected assignment: missing customer, restaurant or delivery time")
            raise InvalidArgumentError()
        
        customer_city = _city_key(customer)
        restaurant_city = _city_key(restaurant)
        if customer_city is None or restaurant_city is None:
            logger.warning(
                f"Rejected assignment: customer {customer.name} or restaurant "
                f"{restaurant.name} has no city"
            )
            raise InvalidArgumentError()
        
        if customer_city != restaurant_city:
            logger.warning(
                f"Rejected assignment: customer {customer.name} and restaurant "
                f"{restaurant.name} are in different cities"
            )
            raise CityMismatchError()
        
        requested_time = to_naive_utc(requested_time)
        lock = self._lock or get_assignment_lock()
        
        async with lock:
            candidates = await self.eligibility.eligible(customer.city, requested_time)
            if not candidates:
                logger.warning(
                    f"No free driver in {customer.city.name} at {requested_time.isoformat()}"
                )
                raise NoAvailableDriverError()
            
            driver = await self.load_balancer.choose_least_busy(candidates)
            delivery = Delivery(
                driver=driver,
                restaurant=restaurant,
                customer=customer,
                delivery_time=requested_time,
                distance=self.sampler.sample(),
            )
            
            try:
                delivery = await self.repository.save_delivery(delivery)
            except IntegrityError as e:
                await self.repository.rollback()
                logger.warning(f"Driver {driver.name} was booked concurrently: {e.orig}")
                raise NoAvailableDriverError() from e
        
        logger.info(
            f"Assigned delivery {delivery.id} to driver {driver.name} "
            f"({delivery.distance:.2f} km) at {requested_time.isoformat()}"
        )
        return delivery
