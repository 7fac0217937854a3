"""
Unit tests for distance sampling.
"""

import random

import pytest

from delivery_dispatch.services.distance import UniformDistanceSampler, get_distance_sampler


class _EdgeRandom(random.Random):
    """Random source stuck at the top of [0, 1)."""

    def random(self):
        return 1.0 - 2 ** -53


class TestUniformDistanceSampler:
    """Distances are bounded to [min_km, max_km)."""
    
    def test_default_bounds(self):
        sampler = UniformDistanceSampler()
        assert sampler.min_km == 0.0
        assert sampler.max_km == 20.0
    
    def test_samples_within_bounds(self):
        sampler = UniformDistanceSampler(rng=random.Random(42))
        samples = [sampler.sample() for _ in range(1000)]
        
        assert all(0.0 <= s < 20.0 for s in samples)
        # Not stuck on one value
        assert len(set(samples)) > 1
    
    def test_upper_bound_excluded(self):
        sampler = UniformDistanceSampler(rng=_EdgeRandom())
        assert sampler.sample() < 20.0
    
    def test_custom_bounds(self):
        sampler = UniformDistanceSampler(min_km=2.0, max_km=3.0, rng=random.Random(7))
        samples = [sampler.sample() for _ in range(200)]
        assert all(2.0 <= s < 3.0 for s in samples)
    
    def test_invalid_bounds_rejected(self):
        with pytest.raises(ValueError):
            UniformDistanceSampler(min_km=5.0, max_km=5.0)
    
    def test_dependency_returns_uniform_sampler(self):
        assert isinstance(get_distance_sampler(), UniformDistanceSampler)
