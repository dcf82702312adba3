import logging
from typing import Dict, List, Optional

from transit_db.algorithms.route_stats import RouteStatsCalculator
from transit_db.core.exceptions import (
    BusNotFoundException,
    DuplicateBusException,
    StatisticsNotComputedException,
)
from transit_db.db.stop_registry import StopRegistry
from transit_db.models.domain import Bus, BusStats, RouteTopology

logger = logging.getLogger(__name__)


class BusRegistry:
    """버스 번호 -> 노선 정보 및 통계"""

    def __init__(
        self,
        stop_registry: StopRegistry,
        stats_calculator: Optional[RouteStatsCalculator] = None,
    ):
        self._buses: Dict[str, Bus] = {}
        self.stop_registry = stop_registry
        self.stats_calculator = stats_calculator or RouteStatsCalculator(
            stop_registry, stop_registry.road_graph
        )
        self.stats_computed = False

    def add_route(self, bus_id: str, stops: List[str], topology: RouteTopology) -> Bus:
        """
        노선 등록 (통계는 계산하지 않음)

        Raises:
            DuplicateBusException: 이미 등록된 버스 번호일 때 (상태 변경 없음)
        """
        if bus_id in self._buses:
            raise DuplicateBusException(f"이미 등록된 버스입니다: {bus_id}")

        bus = Bus(bus_id=bus_id, stops=list(stops), topology=topology)
        self._buses[bus_id] = bus

        for stop_name in bus.stops:
            self.stop_registry.register_bus_at_stop(stop_name, bus_id)

        return bus

    def recompute_all_statistics(self) -> None:
        for bus in self._buses.values():
            bus.stats = self.stats_calculator.compute(bus)

        self.stats_computed = True
        invalid = sum(1 for bus in self._buses.values() if not bus.stats.is_valid)
        logger.info(f"노선 통계 계산 완료: {len(self._buses)}개 버스, 오류 {invalid}개")

    def get_bus(self, bus_id: str) -> Bus:
        bus = self._buses.get(bus_id)
        if bus is None:
            raise BusNotFoundException(f"버스를 찾을 수 없습니다: {bus_id}")
        return bus

    def get_bus_stats(self, bus_id: str) -> BusStats:
        bus = self.get_bus(bus_id)
        if bus.stats is None:
            raise StatisticsNotComputedException(
                f"노선 통계가 아직 계산되지 않았습니다: {bus_id}"
            )
        return bus.stats

    def bus_ids(self) -> List[str]:
        return sorted(self._buses)

    def __contains__(self, bus_id: str) -> bool:
        return bus_id in self._buses

    def __len__(self) -> int:
        return len(self._buses)
