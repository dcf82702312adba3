import logging
from typing import Dict, List, Optional

from transit_db.algorithms.distance_calculator import DistanceCalculator
from transit_db.algorithms.route_stats import RouteStatsCalculator
from transit_db.db.bus_registry import BusRegistry
from transit_db.db.road_graph import RoadGraph
from transit_db.db.stop_registry import StopRegistry
from transit_db.models.domain import Bus, BusStats, RouteTopology, Stop

logger = logging.getLogger(__name__)


class TransportDatabase:
    """
    세션 단위 in-memory 교통 데이터베이스
    정류장 / 도로 거리 그래프 / 버스 노선 registry를 하나로 묶음
    """

    def __init__(self, distance_calc: Optional[DistanceCalculator] = None):
        self.road_graph = RoadGraph()
        self.stops = StopRegistry(self.road_graph)
        self.buses = BusRegistry(
            self.stops,
            RouteStatsCalculator(self.stops, self.road_graph, distance_calc),
        )

    def add_or_update_stop(
        self, name: str, lat: float, lon: float, distances: Dict[str, int]
    ) -> Stop:
        return self.stops.define_stop(name, lat, lon, distances)

    def add_bus(self, bus_id: str, stops: List[str], topology: RouteTopology) -> Bus:
        return self.buses.add_route(bus_id, stops, topology)

    def update_all_buses_stats(self) -> None:
        logger.info(
            f"통계 계산 시작: 정류장 {len(self.stops)}개, "
            f"도로 간선 {len(self.road_graph)}개, 버스 {len(self.buses)}개"
        )
        self.buses.recompute_all_statistics()

    def get_bus_stats(self, bus_id: str) -> BusStats:
        return self.buses.get_bus_stats(bus_id)

    def get_stop_buses(self, stop_name: str) -> List[str]:
        return self.stops.get_stop_buses(stop_name)

    @property
    def stats_computed(self) -> bool:
        return self.buses.stats_computed
