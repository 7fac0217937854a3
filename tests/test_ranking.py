"""
Unit tests for the driver rank report.
"""

from datetime import timedelta

import pytest

from delivery_dispatch.services.ranking import RankingAggregator
from tests.fixtures.test_data import DELIVERY_TIME, DRIVERS, city_driver_count


async def _history(seed_data, add_delivery, driver_name, distances, restaurant="breakfast", customer="Obama"):
    driver = seed_data["drivers"][driver_name]
    for i, distance in enumerate(distances):
        await add_delivery(
            driver,
            seed_data["restaurants"][restaurant],
            seed_data["customers"][customer],
            DELIVERY_TIME + timedelta(hours=i),
            distance,
        )


class TestGlobalRanking:
    """Ranking across every driver."""
    
    @pytest.mark.asyncio
    async def test_sorted_by_total_distance(self, repository, seed_data, add_delivery):
        """A with 5 + 7 and B with 20 ranks B first."""
        await _history(seed_data, add_delivery, "James", [5.0, 7.0])
        await _history(seed_data, add_delivery, "John", [20.0])
        
        report = await RankingAggregator(repository).rank()
        
        assert [(line.driver.name, line.total_distance) for line in report[:2]] == [
            ("John", 20),
            ("James", 12),
        ]
    
    @pytest.mark.asyncio
    async def test_includes_drivers_without_deliveries(self, repository, seed_data):
        report = await RankingAggregator(repository).rank()
        
        assert len(report) == len(DRIVERS)
        assert all(line.total_distance == 0 for line in report)
    
    @pytest.mark.asyncio
    async def test_each_delivery_truncated_before_summing(self, repository, seed_data, add_delivery):
        """5.9 + 7.9 counts as 5 + 7, not int(13.8)."""
        await _history(seed_data, add_delivery, "James", [5.9, 7.9])
        
        report = await RankingAggregator(repository).rank()
        
        james = next(line for line in report if line.driver.name == "James")
        assert james.total_distance == 12
    
    @pytest.mark.asyncio
    async def test_ties_keep_registration_order(self, repository, seed_data, add_delivery):
        await _history(seed_data, add_delivery, "John", [3.0])
        await _history(seed_data, add_delivery, "James", [3.0])
        
        report = await RankingAggregator(repository).rank()
        
        assert [line.driver.name for line in report[:2]] == ["James", "John"]
    
    @pytest.mark.asyncio
    async def test_descending_order(self, repository, seed_data, add_delivery):
        await _history(seed_data, add_delivery, "Mary", [1.0], "vegan", "Bach")
        await _history(seed_data, add_delivery, "Daniel", [9.0, 9.0], "vegan", "Bach")
        await _history(seed_data, add_delivery, "Dany", [15.0], "indian", "Picasso")
        
        report = await RankingAggregator(repository).rank()
        totals = [line.total_distance for line in report]
        
        assert totals == sorted(totals, reverse=True)
        assert report[0].driver.name == "Daniel"


class TestCityRanking:
    """Ranking restricted to one city's drivers."""
    
    @pytest.mark.asyncio
    async def test_only_city_drivers(self, repository, seed_data, add_delivery):
        await _history(seed_data, add_delivery, "Dany", [15.0], "indian", "Picasso")
        await _history(seed_data, add_delivery, "Daniel", [4.0], "vegan", "Bach")
        
        city = seed_data["cities"]["Tel-Aviv"]
        report = await RankingAggregator(repository).rank(city)
        
        assert len(report) == city_driver_count("Tel-Aviv")
        assert all(line.driver.city_id == city.id for line in report)
        assert [(line.driver.name, line.total_distance) for line in report] == [
            ("Daniel", 4),
            ("Mary", 0),
            ("Patricia", 0),
        ]
    
    @pytest.mark.asyncio
    async def test_city_with_single_idle_driver(self, repository, seed_data):
        city = seed_data["cities"]["Rishon-Lezion"]
        report = await RankingAggregator(repository).rank(city)
        
        assert [(line.driver.name, line.total_distance) for line in report] == [("Dany", 0)]
    
    @pytest.mark.asyncio
    async def test_report_is_read_only(self, repository, seed_data, add_delivery):
        await _history(seed_data, add_delivery, "James", [5.5])
        before = await repository.find_all_deliveries()
        
        await RankingAggregator(repository).rank(seed_data["cities"]["Beer-Sheva"])
        
        after = await repository.find_all_deliveries()
        assert [(d.id, d.distance) for d in after] == [(d.id, d.distance) for d in before]


class TestDistanceQuery:
    """The scoped query behind ranking."""
    
    @pytest.mark.asyncio
    async def test_returns_driver_distance_pairs(self, repository, seed_data, add_delivery):
        await _history(seed_data, add_delivery, "James", [5.5, 7.0])
        await _history(seed_data, add_delivery, "Dany", [15.0], "indian", "Picasso")
        james = seed_data["drivers"]["James"]
        
        rows = await repository.find_distances_for_drivers([james.id])
        
        assert rows == [(james.id, 5.5), (james.id, 7.0)]
    
    @pytest.mark.asyncio
    async def test_no_driver_ids(self, repository, seed_data):
        assert await repository.find_distances_for_drivers([]) == []
