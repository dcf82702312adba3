"""
JSON 문서 프로토콜 <-> 내부 요청/응답 변환

지원 데이터 포맷:
    {
        "base_requests": [
            {"type": "Stop", "name": "...", "latitude": 55.6, "longitude": 37.2,
             "road_distances": {"...": 3900}},
            {"type": "Bus", "name": "750", "stops": [...], "is_roundtrip": false}
        ],
        "stat_requests": [
            {"type": "Bus", "name": "750", "id": 519139350},
            {"type": "Stop", "name": "...", "id": 65100610}
        ]
    }
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

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


class JsonProtocol:
    """JSON 요청 문서 파서 / 응답 직렬화"""

    MUTATIONS_KEY = "base_requests"
    READS_KEY = "stat_requests"

    def __init__(self, curvature_precision: Optional[int] = None):
        self.curvature_precision = curvature_precision or settings.CURVATURE_PRECISION

    # ========== 요청 파싱 ==========

    def loads(self, text: str) -> Dict[str, Any]:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise RequestParseException(f"Invalid JSON format: {e}")

        if not isinstance(document, dict):
            raise RequestParseException("JSON 문서의 최상위는 object여야 합니다")
        return document

    def read_requests(self, document: Union[str, Dict[str, Any]]) -> Tuple[List, List]:
        if isinstance(document, str):
            document = self.loads(document)

        mutations = []
        for node in self._get_list(document, self.MUTATIONS_KEY):
            request = self.parse_mutation(node)
            if request is not None:
                mutations.append(request)

        reads = []
        for node in self._get_list(document, self.READS_KEY):
            request = self.parse_read(node)
            if request is not None:
                reads.append(request)

        return mutations, reads

    @staticmethod
    def _get_list(document: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
        nodes = document.get(key, [])
        if not isinstance(nodes, list):
            raise RequestParseException(f"'{key}' 는 list여야 합니다")
        return nodes

    def parse_mutation(self, node: Dict[str, Any]):
        try:
            request_type = node["type"]
            if request_type == "Stop":
                return AddStopRequest(
                    name=node["name"],
                    latitude=node["latitude"],
                    longitude=node["longitude"],
                    road_distances=node.get("road_distances", {}),
                )
            if request_type == "Bus":
                request_class = (
                    AddBusRingRequest if node.get("is_roundtrip") else AddBusLinearRequest
                )
                return request_class(name=node["name"], stops=node["stops"])
        except (KeyError, TypeError) as e:
            raise RequestParseException(f"변경 요청 필드 누락: {e} in {node!r}")
        except ValidationError as e:
            raise RequestParseException(
                f"잘못된 변경 요청: {node.get('name')!r} ({e.error_count()} errors)"
            )

        logger.warning(f"알 수 없는 변경 요청 무시: {node!r}")
        return None

    def parse_read(self, node: Dict[str, Any]):
        try:
            request_type = node["type"]
            if request_type == "Bus":
                return GetBusInfoRequest(name=node["name"], request_id=node["id"])
            if request_type == "Stop":
                return GetStopInfoRequest(name=node["name"], request_id=node["id"])
        except (KeyError, TypeError) as e:
            raise RequestParseException(f"조회 요청 필드 누락: {e} in {node!r}")
        except ValidationError as e:
            raise RequestParseException(
                f"잘못된 조회 요청: {node.get('name')!r} ({e.error_count()} errors)"
            )

        logger.warning(f"알 수 없는 조회 요청 무시: {node!r}")
        return None

    # ========== 응답 직렬화 ==========

    def response_to_dict(self, response: Response) -> Dict[str, Any]:
        if isinstance(response, NotFoundResponse):
            return {"request_id": response.request_id, "error_message": response.error}

        if isinstance(response, StopInfoResponse):
            return {"buses": list(response.buses), "request_id": response.request_id}

        if isinstance(response, BusInfoResponse):
            result = {
                "route_length": response.route_length,
                "request_id": response.request_id,
                "curvature": self._round_curvature(response.curvature),
                "stop_count": response.stop_count,
                "unique_stop_count": response.unique_stop_count,
            }
            if response.error:
                result["error_message"] = response.error
            return result

        raise TypeError(f"지원하지 않는 응답: {type(response).__name__}")

    def responses_to_json(self, responses: List[Response]) -> List[Dict[str, Any]]:
        return [self.response_to_dict(r) for r in responses]

    def dumps(self, responses: List[Response]) -> str:
        return self.format_json(self.responses_to_json(responses))

    @staticmethod
    def format_json(payload: List[Dict[str, Any]]) -> str:
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def _round_curvature(self, curvature: Optional[float]) -> Optional[float]:
        # 유효숫자 기준 반올림 (1.3612391... -> 1.36124)
        if curvature is None:
            return None
        return float(f"{curvature:.{self.curvature_precision}g}")
