"""
in-memory 정류장 / 도로 거리 / 버스 노선 저장소
"""

from transit_db.db.road_graph import RoadGraph
from transit_db.db.stop_registry import StopRegistry
from transit_db.db.bus_registry import BusRegistry
from transit_db.db.database import TransportDatabase

__all__ = [
    "RoadGraph",
    "StopRegistry",
    "BusRegistry",
    "TransportDatabase",
]
