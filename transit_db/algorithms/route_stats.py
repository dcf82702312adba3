"""
버스 노선 통계 계산

- 정류장 수 (왕복 노선은 되돌아오는 구간까지 전개)
- 고유 정류장 수
- 도로 기준 노선 길이 (road_graph, 역방향 fallback 포함)
- 곡률 = 도로 길이 / 직선(대원) 거리

계산 중 데이터 누락이 있어도 배치 전체를 중단하지 않고
해당 버스의 BusStats.error 에 기록한다.
"""

import logging
from itertools import islice
from typing import Iterator, List, Optional, Sequence

from transit_db.algorithms.distance_calculator import DistanceCalculator
from transit_db.core.config import (
    DEGENERATE_CURVATURE_MESSAGE,
    MISSING_DISTANCE_MESSAGE,
    UNDEFINED_STOP_MESSAGE,
)
from transit_db.core.exceptions import MissingDistanceException, UndefinedStopException
from transit_db.models.domain import Bus, BusStats, RouteTopology

logger = logging.getLogger(__name__)


def iter_effective_route(stops: Sequence[str], topology: RouteTopology) -> Iterator[str]:
    """
    실제 운행 순서대로 정류장 이름을 yield

    CIRCULAR: 입력 순서 그대로 한 번
    LINEAR: 입력 순서 + 역순 (반환 지점 정류장은 한 번만)
    """
    yield from stops
    if topology == RouteTopology.LINEAR:
        yield from islice(reversed(stops), 1, None)


def effective_stop_count(stops: Sequence[str], topology: RouteTopology) -> int:
    if topology == RouteTopology.LINEAR:
        return max(2 * len(stops) - 1, 0)
    return len(stops)


def iter_route_pairs(stops: Sequence[str], topology: RouteTopology):
    """연속된 (출발, 도착) 정류장 쌍"""
    route = iter_effective_route(stops, topology)
    prev = next(route, None)
    for current in route:
        yield prev, current
        prev = current


class RouteStatsCalculator:
    """버스별 통계 계산기 => 버스 간 독립적이므로 순서 무관"""

    def __init__(self, stop_registry, road_graph, distance_calc: Optional[DistanceCalculator] = None):
        self.stop_registry = stop_registry
        self.road_graph = road_graph
        self.distance_calc = distance_calc or DistanceCalculator()

    def compute(self, bus: Bus) -> BusStats:
        stop_count = effective_stop_count(bus.stops, bus.topology)
        unique_stop_count = len(set(bus.stops))

        route_length: Optional[int] = 0
        geo_length: Optional[float] = 0.0
        errors: List[str] = []

        for from_stop, to_stop in iter_route_pairs(bus.stops, bus.topology):
            if route_length is not None:
                try:
                    route_length += self.road_graph.get_distance(from_stop, to_stop)
                except MissingDistanceException as e:
                    logger.warning(f"Bus {bus.bus_id}: {e.message}")
                    route_length = None
                    errors.append(MISSING_DISTANCE_MESSAGE)

            if geo_length is not None:
                try:
                    geo_length += self._geo_distance(from_stop, to_stop)
                except UndefinedStopException as e:
                    logger.warning(f"Bus {bus.bus_id}: {e.message}")
                    geo_length = None
                    errors.append(UNDEFINED_STOP_MESSAGE)

        curvature = None
        if route_length is not None and geo_length is not None:
            if geo_length > 0:
                curvature = route_length / geo_length
            else:
                errors.append(DEGENERATE_CURVATURE_MESSAGE)

        stats = BusStats(
            stop_count=stop_count,
            unique_stop_count=unique_stop_count,
            route_length=route_length,
            geo_length=geo_length,
            curvature=curvature,
            error=", ".join(errors) if errors else None,
        )
        logger.debug(f"Bus {bus.bus_id} 통계: {stats}")
        return stats

    def _geo_distance(self, from_stop: str, to_stop: str) -> float:
        lat1, lon1 = self.stop_registry.get_coordinates(from_stop)
        lat2, lon2 = self.stop_registry.get_coordinates(to_stop)
        return self.distance_calc.calculate_distance(lat1, lon1, lat2, lon2)
