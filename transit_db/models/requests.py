from typing import Annotated, Dict, List, Literal, Union
from pydantic import BaseModel, Field, NonNegativeInt

# 프로토콜(text/json)과 무관한 내부 요청 구조 정의
# type 필드로 구분되는 closed tagged union


# 정류장 추가/갱신
class AddStopRequest(BaseModel):
    type: Literal["add_stop"] = "add_stop"
    name: str = Field(..., min_length=1, description="정류장 이름")
    latitude: float = Field(..., ge=-90, le=90, description="위도")
    longitude: float = Field(..., ge=-180, le=180, description="경도")
    road_distances: Dict[str, NonNegativeInt] = Field(
        default_factory=dict, description="이웃 정류장까지 도로 거리 (미터)"
    )


# 왕복 노선 추가
class AddBusLinearRequest(BaseModel):
    type: Literal["add_bus_linear"] = "add_bus_linear"
    name: str = Field(..., min_length=1, description="버스 번호")
    stops: List[str] = Field(..., min_length=2, description="정류장 순서")


# 순환 노선 추가 (첫 정류장 == 마지막 정류장)
class AddBusRingRequest(BaseModel):
    type: Literal["add_bus_ring"] = "add_bus_ring"
    name: str = Field(..., min_length=1, description="버스 번호")
    stops: List[str] = Field(..., min_length=1, description="정류장 순서")


class GetBusInfoRequest(BaseModel):
    type: Literal["get_bus_info"] = "get_bus_info"
    name: str = Field(..., description="버스 번호")
    request_id: int = Field(..., description="요청 ID")


class GetStopInfoRequest(BaseModel):
    type: Literal["get_stop_info"] = "get_stop_info"
    name: str = Field(..., description="정류장 이름")
    request_id: int = Field(..., description="요청 ID")


MutationRequest = Annotated[
    Union[AddStopRequest, AddBusLinearRequest, AddBusRingRequest],
    Field(discriminator="type"),
]

ReadRequest = Annotated[
    Union[GetBusInfoRequest, GetStopInfoRequest],
    Field(discriminator="type"),
]
