"""
Distance sampling for new deliveries.
Real travel distances are out of scope; each delivery gets a sampled value.
"""

import random
from typing import Optional, Protocol

from delivery_dispatch.config import get_settings


class DistanceSampler(Protocol):
    """Anything that can produce a distance (km) for a new delivery."""

    def sample(self) -> float:
        ...


class UniformDistanceSampler:
    """Draws distances uniformly from [min_km, max_km)."""

    def __init__(
        self,
        min_km: Optional[float] = None,
        max_km: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        settings = get_settings()
        self.min_km = settings.min_km if min_km is None else min_km
        self.max_km = settings.max_km if max_km is None else max_km
        if self.max_km <= self.min_km:
            raise ValueError(f"max_km ({self.max_km}) must be greater than min_km ({self.min_km})")
        self.rng = rng or random.Random()

    def sample(self) -> float:
        # random() is in [0, 1), so the upper bound is never reached
        return self.min_km + self.rng.random() * (self.max_km - self.min_km)


def get_distance_sampler() -> DistanceSampler:
    """Dependency providing the default sampler."""
    return UniformDistanceSampler()
