import logging
from typing import Dict, Tuple

from transit_db.core.exceptions import MissingDistanceException

logger = logging.getLogger(__name__)


class RoadGraph:
    """
    정류장 간 도로 거리 (방향 그래프)

    A→B 와 B→A 는 서로 다를 수 있음
    A→B 가 없으면 B→A 값을 그대로 사용 (역방향 fallback)
    """

    def __init__(self):
        self._edges: Dict[Tuple[str, str], int] = {}  # {(from, to): meters}
        self._outgoing: Dict[str, set] = {}  # {from: {to, ...}}

    def set_distance(self, from_stop: str, to_stop: str, meters: int) -> None:
        self._edges[(from_stop, to_stop)] = meters
        self._outgoing.setdefault(from_stop, set()).add(to_stop)

    def clear_outgoing(self, from_stop: str) -> None:
        """정류장 재정의 시 기존 출발 간선 제거"""
        for to_stop in self._outgoing.pop(from_stop, set()):
            del self._edges[(from_stop, to_stop)]

    def get_distance(self, from_stop: str, to_stop: str) -> int:
        distance = self._edges.get((from_stop, to_stop))
        if distance is not None:
            return distance

        # 역방향 fallback
        distance = self._edges.get((to_stop, from_stop))
        if distance is not None:
            return distance

        raise MissingDistanceException(
            f"도로 거리 정보가 없습니다: {from_stop} → {to_stop}"
        )

    def has_distance(self, from_stop: str, to_stop: str) -> bool:
        return (from_stop, to_stop) in self._edges or (to_stop, from_stop) in self._edges

    def outgoing(self, from_stop: str) -> Dict[str, int]:
        return {
            to_stop: self._edges[(from_stop, to_stop)]
            for to_stop in self._outgoing.get(from_stop, ())
        }

    def __len__(self) -> int:
        return len(self._edges)
