import logging
from typing import Dict, List, Optional, Tuple

from transit_db.core.exceptions import StopNotFoundException, UndefinedStopException
from transit_db.db.road_graph import RoadGraph
from transit_db.models.domain import Stop

logger = logging.getLogger(__name__)


class StopRegistry:
    """
    정류장 이름 -> 좌표, 경유 버스 매핑

    노선이나 이웃 거리에서 이름만 먼저 언급된 정류장(forward reference)은
    좌표 없는 placeholder로 생성됨
    """

    def __init__(self, road_graph: Optional[RoadGraph] = None):
        self._stops: Dict[str, Stop] = {}
        self.road_graph = road_graph if road_graph is not None else RoadGraph()

    def ensure_stop(self, name: str) -> Stop:
        stop = self._stops.get(name)
        if stop is None:
            stop = Stop(name=name)
            self._stops[name] = stop
            logger.debug(f"placeholder 정류장 생성: {name}")
        return stop

    def define_stop(
        self, name: str, lat: float, lon: float, distances: Dict[str, int]
    ) -> Stop:
        """정류장 생성 또는 좌표/출발 간선 갱신"""
        stop = self.ensure_stop(name)
        stop.lat = lat
        stop.lon = lon

        # 기존 출발 간선은 덮어씀
        self.road_graph.clear_outgoing(name)
        for neighbor, meters in distances.items():
            self.ensure_stop(neighbor)
            self.road_graph.set_distance(name, neighbor, meters)

        return stop

    def get_stop(self, name: str) -> Stop:
        stop = self._stops.get(name)
        if stop is None:
            raise StopNotFoundException(f"정류장을 찾을 수 없습니다: {name}")
        return stop

    def get_coordinates(self, name: str) -> Tuple[float, float]:
        stop = self.get_stop(name)
        if not stop.is_defined:
            raise UndefinedStopException(f"좌표가 정의되지 않은 정류장입니다: {name}")
        return stop.lat, stop.lon

    def register_bus_at_stop(self, stop_name: str, bus_id: str) -> None:
        self.ensure_stop(stop_name).buses.add(bus_id)

    def get_stop_buses(self, name: str) -> List[str]:
        return sorted(self.get_stop(name).buses)

    def __contains__(self, name: str) -> bool:
        return name in self._stops

    def __len__(self) -> int:
        return len(self._stops)
