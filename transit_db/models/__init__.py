"""
pydantic models for 요청, 응답, 도메인 객체
"""


from transit_db.models.requests import (
    AddStopRequest,
    AddBusLinearRequest,
    AddBusRingRequest,
    GetBusInfoRequest,
    GetStopInfoRequest,
    MutationRequest,
    ReadRequest,
)
from transit_db.models.responses import (
    BusInfoResponse,
    StopInfoResponse,
    NotFoundResponse,
    RejectedRequest,
    ErrorResponse,
    SessionResponse,
    Response,
)
from transit_db.models.domain import Stop, Bus, BusStats, RouteTopology

__all__ = [
    "AddStopRequest",
    "AddBusLinearRequest",
    "AddBusRingRequest",
    "GetBusInfoRequest",
    "GetStopInfoRequest",
    "MutationRequest",
    "ReadRequest",
    "BusInfoResponse",
    "StopInfoResponse",
    "NotFoundResponse",
    "RejectedRequest",
    "ErrorResponse",
    "SessionResponse",
    "Response",
    "Stop",
    "Bus",
    "BusStats",
    "RouteTopology",
]
