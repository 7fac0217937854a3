"""Services package initialization."""

from delivery_dispatch.services.eligibility import EligibilityFilter
from delivery_dispatch.services.load_balancer import LoadBalancer
from delivery_dispatch.services.distance import DistanceSampler, UniformDistanceSampler, get_distance_sampler
from delivery_dispatch.services.ranking import RankingAggregator, DriverDistance
from delivery_dispatch.services.assignment import AssignmentCoordinator
from delivery_dispatch.services.dispatch_service import DispatchService

__all__ = [
    "EligibilityFilter",
    "LoadBalancer",
    "DistanceSampler",
    "UniformDistanceSampler",
    "get_distance_sampler",
    "RankingAggregator",
    "DriverDistance",
    "AssignmentCoordinator",
    "DispatchService",
]
