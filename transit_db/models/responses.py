from typing import List, Optional, Union
from pydantic import BaseModel, Field

from transit_db.core.config import NOT_FOUND_MESSAGE

# 조회 요청별 응답 구조 정의


# 버스 노선 통계 응답
class BusInfoResponse(BaseModel):
    request_id: int = Field(..., description="요청 ID")
    name: str = Field(..., description="버스 번호")
    route_length: Optional[int] = Field(None, description="도로 기준 노선 길이 (미터)")
    curvature: Optional[float] = Field(None, description="도로 길이 / 직선 거리")
    stop_count: int = Field(..., description="정류장 수 (왕복 전개 기준)")
    unique_stop_count: int = Field(..., description="고유 정류장 수")
    error: Optional[str] = Field(None, description="통계 계산 오류 (정상일 때 None)")


# 정류장 경유 버스 응답
class StopInfoResponse(BaseModel):
    request_id: int = Field(..., description="요청 ID")
    name: str = Field(..., description="정류장 이름")
    buses: List[str] = Field(default_factory=list, description="경유 버스 (이름순)")


# 존재하지 않는 버스/정류장
class NotFoundResponse(BaseModel):
    request_id: int = Field(..., description="요청 ID")
    name: str = Field(..., description="조회한 이름")
    kind: str = Field(..., description="조회 대상 (Bus/Stop)")
    error: str = Field(default=NOT_FOUND_MESSAGE, description="에러 메시지")


# 중복 등록 등으로 거부된 변경 요청
class RejectedRequest(BaseModel):
    name: str = Field(..., description="거부된 요청의 대상 이름")
    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")


# 에러 응답
class ErrorResponse(BaseModel):
    error: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")


# HTTP 세션 응답
class SessionResponse(BaseModel):
    responses: List[dict] = Field(default_factory=list, description="조회 응답 리스트")
    rejected: List[RejectedRequest] = Field(
        default_factory=list, description="거부된 변경 요청"
    )


Response = Union[BusInfoResponse, StopInfoResponse, NotFoundResponse]
