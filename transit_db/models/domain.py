from enum import Enum
from typing import List, Optional, Set, Tuple
from dataclasses import dataclass, field

# domain 정의


class RouteTopology(str, Enum):
    LINEAR = "linear"  # 왕복 노선 (A - B - C => A B C B A)
    CIRCULAR = "circular"  # 순환 노선 (A > B > A)


@dataclass
class Stop:
    name: str
    lat: Optional[float] = None  # 이름만 참조된 정류장은 좌표 없음
    lon: Optional[float] = None
    buses: Set[str] = field(default_factory=set)

    @property
    def is_defined(self) -> bool:
        return self.lat is not None and self.lon is not None

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        if not self.is_defined:
            return None
        return self.lat, self.lon


@dataclass
class BusStats:
    stop_count: int
    unique_stop_count: int
    route_length: Optional[int]  # 거리 정보 누락 시 None
    geo_length: Optional[float]
    curvature: Optional[float]
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


@dataclass
class Bus:
    bus_id: str
    stops: List[str]  # 입력받은 그대로의 정류장 순서
    topology: RouteTopology
    stats: Optional[BusStats] = None
