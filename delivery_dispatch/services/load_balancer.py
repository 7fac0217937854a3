"""
Least-busy driver selection.
"""

import logging
from typing import Sequence

from delivery_dispatch.models import Driver
from delivery_dispatch.repository import DispatchRepository

logger = logging.getLogger(__name__)


class LoadBalancer:
    """Picks the candidate with the fewest historical deliveries."""

    def __init__(self, repository: DispatchRepository):
        self.repository = repository

    async def choose_least_busy(self, candidates: Sequence[Driver]) -> Driver:
        """
        Select the driver with the strictly smallest delivery count.
        
        Counts cover the driver's whole history, not just the requested
        time or city. On a tie the first candidate in `candidates` wins.
        
        Raises:
            ValueError: If `candidates` is empty
        """
        if not candidates:
            raise ValueError("Cannot choose a driver from an empty candidate list")
        
        counts = await self.repository.count_deliveries_by_driver(d.id for d in candidates)
        
        chosen = candidates[0]
        min_count = counts.get(chosen.id, 0)
        for driver in candidates[1:]:
            count = counts.get(driver.id, 0)
            if count < min_count:
                chosen = driver
                min_count = count
        
        logger.debug(f"Least busy driver: {chosen.name} ({min_count} prior deliveries)")
        return chosen
