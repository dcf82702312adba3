# 요청 처리 서비스 => 변경 요청 일괄 적용 후 통계 계산, 이후 조회 요청 응답

import logging
import time
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from transit_db.core.exceptions import (
    BusNotFoundException,
    DuplicateBusException,
    SessionStateException,
    StopNotFoundException,
)
from transit_db.db.database import TransportDatabase
from transit_db.models.domain import RouteTopology
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
    RejectedRequest,
    Response,
    StopInfoResponse,
)

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    ACCEPTING_MUTATIONS = "accepting_mutations"
    STATS_COMPUTED = "stats_computed"
    ANSWERING_READS = "answering_reads"


class RequestProcessor:
    """
    한 세션의 요청 처리기

    ACCEPTING_MUTATIONS -> STATS_COMPUTED -> ANSWERING_READS
    변경 요청과 조회 요청은 섞이지 않음 => 순서 보장은 호출자 책임
    """

    def __init__(self, db: Optional[TransportDatabase] = None):
        self.db = db if db is not None else TransportDatabase()
        self.state = SessionState.ACCEPTING_MUTATIONS

    def apply_mutations(self, requests: Iterable) -> List[RejectedRequest]:
        """
        변경 요청 일괄 적용 후 통계 1회 계산

        Returns:
            거부된 요청 리스트 (중복 버스 등)

        Raises:
            SessionStateException: 이미 통계 계산이 끝난 세션일 때
        """
        if self.state != SessionState.ACCEPTING_MUTATIONS:
            raise SessionStateException(
                f"변경 요청은 통계 계산 전에만 가능합니다 (state={self.state.value})"
            )

        start_time = time.time()
        applied = 0
        rejected: List[RejectedRequest] = []

        for request in requests:
            try:
                self._apply_mutation(request)
                applied += 1
            except DuplicateBusException as e:
                logger.warning(f"변경 요청 거부: {e.message}")
                rejected.append(
                    RejectedRequest(name=request.name, code=e.code, message=e.message)
                )

        self.db.update_all_buses_stats()
        self.state = SessionState.STATS_COMPUTED

        elapsed_time = time.time() - start_time
        logger.info(
            f"변경 요청 처리 완료: 적용 {applied}개, 거부 {len(rejected)}개, "
            f"처리시간={elapsed_time*1000:.1f}ms"
        )
        return rejected

    def _apply_mutation(self, request) -> None:
        if isinstance(request, AddStopRequest):
            self.db.add_or_update_stop(
                request.name,
                request.latitude,
                request.longitude,
                request.road_distances,
            )
        elif isinstance(request, AddBusLinearRequest):
            self.db.add_bus(request.name, request.stops, RouteTopology.LINEAR)
        elif isinstance(request, AddBusRingRequest):
            self.db.add_bus(request.name, request.stops, RouteTopology.CIRCULAR)
        else:
            raise TypeError(f"지원하지 않는 변경 요청: {type(request).__name__}")

        logger.debug(f"변경 요청 적용: {request.type} {request.name}")

    def answer_reads(self, requests: Iterable) -> List[Response]:
        """
        조회 요청 처리 => 입력 순서 그대로 응답

        Raises:
            SessionStateException: 통계 계산 전에 호출했을 때
        """
        if self.state == SessionState.ACCEPTING_MUTATIONS:
            raise SessionStateException("통계 계산 전에는 조회할 수 없습니다")

        self.state = SessionState.ANSWERING_READS
        responses = [self._answer_read(request) for request in requests]

        not_found = sum(1 for r in responses if isinstance(r, NotFoundResponse))
        logger.info(f"조회 요청 처리 완료: {len(responses)}개, not found {not_found}개")
        return responses

    def _answer_read(self, request) -> Response:
        if isinstance(request, GetBusInfoRequest):
            try:
                stats = self.db.get_bus_stats(request.name)
            except BusNotFoundException:
                return NotFoundResponse(
                    request_id=request.request_id, name=request.name, kind="Bus"
                )
            return BusInfoResponse(
                request_id=request.request_id,
                name=request.name,
                route_length=stats.route_length,
                curvature=stats.curvature,
                stop_count=stats.stop_count,
                unique_stop_count=stats.unique_stop_count,
                error=stats.error,
            )

        if isinstance(request, GetStopInfoRequest):
            try:
                buses = self.db.get_stop_buses(request.name)
            except StopNotFoundException:
                return NotFoundResponse(
                    request_id=request.request_id, name=request.name, kind="Stop"
                )
            return StopInfoResponse(
                request_id=request.request_id, name=request.name, buses=buses
            )

        raise TypeError(f"지원하지 않는 조회 요청: {type(request).__name__}")

    def process(
        self, mutations: Iterable, reads: Iterable
    ) -> Tuple[List[Response], List[RejectedRequest]]:
        """한 세션 전체 처리"""
        rejected = self.apply_mutations(mutations)
        return self.answer_reads(reads), rejected
