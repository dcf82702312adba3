"""
거리 계산 및 노선 통계 알고리즘
"""

from transit_db.algorithms.distance_calculator import (
    DistanceCalculator,
    great_circle_distance,
)
from transit_db.algorithms.route_stats import (
    RouteStatsCalculator,
    iter_effective_route,
)

__all__ = [
    "DistanceCalculator",
    "great_circle_distance",
    "RouteStatsCalculator",
    "iter_effective_route",
]
