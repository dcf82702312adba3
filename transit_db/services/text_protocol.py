"""
line 기반 텍스트 프로토콜 <-> 내부 요청/응답 변환

입력 형식:
    3
    Stop Tolstopaltsevo: 55.611087, 37.20829, 3900m to Marushkino
    Bus 750: Tolstopaltsevo - Marushkino - Rasskazovka
    Bus 256: Biryulyovo Zapadnoye > Biryusinka > Biryulyovo Zapadnoye
    2
    Bus 750
    Stop Marushkino

출력 형식:
    Bus 750: 5 stops on route, 3 unique stops, 27600 route length, 1.31808 curvature
    Stop Marushkino: buses 750
"""

import re
import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from transit_db.core.config import settings
from transit_db.core.exceptions import RequestParseException
from transit_db.models.requests import (
    AddBusLinearRequest,
    AddBusRingRequest,
    AddStopRequest,
    GetBusInfoRequest,
    GetStopInfoRequest,
)
from transit_db.models.responses import (
    BusInfoResponse,
    NotFoundResponse,
    Response,
    StopInfoResponse,
)

logger = logging.getLogger(__name__)

MutationLine = Union[AddStopRequest, AddBusLinearRequest, AddBusRingRequest]
ReadLine = Union[GetBusInfoRequest, GetStopInfoRequest]


class TextProtocol:
    """텍스트 명령 파서 / 응답 포맷터"""

    STOP_PATTERN = re.compile(
        r"^Stop\s+(?P<name>[^:]+?)\s*:\s*(?P<lat>[^,]+),\s*(?P<lon>[^,]+)(?:,\s*(?P<rest>.*))?$"
    )
    BUS_PATTERN = re.compile(r"^Bus\s+(?P<name>[^:]+?)\s*:\s*(?P<route>.*)$")
    DISTANCE_PATTERN = re.compile(r"^(?P<meters>\d+)m to (?P<stop>.+)$")
    READ_PATTERN = re.compile(r"^(?P<kind>Bus|Stop)\s+(?P<name>.+?)\s*$")

    RING_SEPARATOR = " > "
    LINEAR_SEPARATOR = " - "

    def __init__(self, curvature_precision: Optional[int] = None):
        self.curvature_precision = curvature_precision or settings.CURVATURE_PRECISION

    # ========== 요청 파싱 ==========

    def read_requests(
        self, lines: Iterable[str]
    ) -> Tuple[List[MutationLine], List[ReadLine]]:
        """변경 요청 블록과 조회 요청 블록을 순서대로 읽음"""
        line_iter = iter(lines)
        mutations = [
            request
            for request in map(self.parse_mutation, self._read_block(line_iter))
            if request is not None
        ]
        reads = []
        # 텍스트 프로토콜에는 id가 없으므로 입력 순서를 request_id로 사용
        for request_id, line in enumerate(self._read_block(line_iter)):
            request = self.parse_read(line, request_id)
            if request is not None:
                reads.append(request)
        return mutations, reads

    def _read_block(self, line_iter: Iterator[str]) -> List[str]:
        count_line = next(line_iter, "").strip()
        if not count_line:
            return []
        try:
            count = int(count_line)
        except ValueError:
            raise RequestParseException(f"요청 개수가 올바르지 않습니다: {count_line!r}")

        block = []
        for _ in range(count):
            line = next(line_iter, None)
            if line is None:
                raise RequestParseException(
                    f"요청 {count}개 중 {len(block)}개만 입력되었습니다"
                )
            block.append(line.rstrip("\r\n"))
        return block

    def parse_mutation(self, line: str) -> Optional[MutationLine]:
        line = line.strip()
        try:
            if line.startswith("Stop"):
                return self._parse_stop(line)
            if line.startswith("Bus"):
                return self._parse_bus(line)
        except ValidationError as e:
            raise RequestParseException(f"잘못된 요청: {line!r} ({e.error_count()} errors)")

        logger.warning(f"알 수 없는 변경 요청 무시: {line!r}")
        return None

    def _parse_stop(self, line: str) -> AddStopRequest:
        match = self.STOP_PATTERN.match(line)
        if not match:
            raise RequestParseException(f"정류장 정의 형식 오류: {line!r}")

        distances = {}
        if match.group("rest"):
            for item in match.group("rest").split(", "):
                distance_match = self.DISTANCE_PATTERN.match(item.strip())
                if not distance_match:
                    raise RequestParseException(f"거리 형식 오류: {item!r}")
                distances[distance_match.group("stop")] = int(
                    distance_match.group("meters")
                )

        return AddStopRequest(
            name=match.group("name"),
            latitude=self._to_float(match.group("lat")),
            longitude=self._to_float(match.group("lon")),
            road_distances=distances,
        )

    def _parse_bus(self, line: str) -> Union[AddBusLinearRequest, AddBusRingRequest]:
        match = self.BUS_PATTERN.match(line)
        if not match:
            raise RequestParseException(f"버스 정의 형식 오류: {line!r}")

        name, route = match.group("name"), match.group("route")
        # '>' 가 하나라도 있으면 순환 노선
        if ">" in line:
            stops = [s.strip() for s in route.split(self.RING_SEPARATOR.strip())]
            return AddBusRingRequest(name=name, stops=stops)

        stops = [s.strip() for s in route.split(self.LINEAR_SEPARATOR)]
        return AddBusLinearRequest(name=name, stops=stops)

    def parse_read(self, line: str, request_id: int) -> Optional[ReadLine]:
        match = self.READ_PATTERN.match(line.strip())
        if not match:
            logger.warning(f"알 수 없는 조회 요청 무시: {line!r}")
            return None

        if match.group("kind") == "Bus":
            return GetBusInfoRequest(name=match.group("name"), request_id=request_id)
        return GetStopInfoRequest(name=match.group("name"), request_id=request_id)

    @staticmethod
    def _to_float(value: str) -> float:
        try:
            return float(value)
        except ValueError:
            raise RequestParseException(f"좌표 형식 오류: {value!r}")

    # ========== 응답 포맷 ==========

    def format_response(self, response: Response) -> str:
        if isinstance(response, NotFoundResponse):
            return f"{response.kind} {response.name}: {response.error}"

        if isinstance(response, StopInfoResponse):
            if not response.buses:
                return f"Stop {response.name}: no buses"
            return f"Stop {response.name}: buses {' '.join(response.buses)}"

        if isinstance(response, BusInfoResponse):
            route_length = "n/a" if response.route_length is None else response.route_length
            curvature = (
                "n/a"
                if response.curvature is None
                else f"{response.curvature:.{self.curvature_precision}g}"
            )
            text = (
                f"Bus {response.name}: {response.stop_count} stops on route, "
                f"{response.unique_stop_count} unique stops, "
                f"{route_length} route length, {curvature} curvature"
            )
            if response.error:
                text += f" ({response.error})"
            return text

        raise TypeError(f"지원하지 않는 응답: {type(response).__name__}")

    def format_responses(self, responses: Iterable[Response]) -> str:
        return "".join(f"{self.format_response(r)}\n" for r in responses)
