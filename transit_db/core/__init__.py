"""
Core 설정 및 utilities, 커스텀 예외
"""

from transit_db.core.config import settings

from transit_db.core.exceptions import (
    TransitDBException,
    StopNotFoundException,
    BusNotFoundException,
    DuplicateBusException,
    UndefinedStopException,
    MissingDistanceException,
    StatisticsNotComputedException,
    SessionStateException,
    RequestParseException,
)

__all__ = [
    "settings",
    "TransitDBException",
    "StopNotFoundException",
    "BusNotFoundException",
    "DuplicateBusException",
    "UndefinedStopException",
    "MissingDistanceException",
    "StatisticsNotComputedException",
    "SessionStateException",
    "RequestParseException",
]
