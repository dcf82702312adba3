"""
Pytest 설정 및 공통 Fixture
"""

import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from transit_db.db.database import TransportDatabase  # noqa: E402
from transit_db.services.request_processor import RequestProcessor  # noqa: E402


@pytest.fixture
def db():
    """빈 TransportDatabase 인스턴스"""
    return TransportDatabase()


@pytest.fixture
def processor(db):
    """빈 세션의 RequestProcessor"""
    return RequestProcessor(db)


@pytest.fixture
def moscow_stops():
    """테스트용 샘플 정류장 데이터 {name: (lat, lon, road_distances)}"""
    return {
        "Tolstopaltsevo": (55.611087, 37.20829, {"Marushkino": 3900}),
        "Marushkino": (55.595884, 37.209755, {"Rasskazovka": 9900}),
        "Rasskazovka": (55.632761, 37.333324, {}),
        "Biryulyovo Zapadnoye": (
            55.574371,
            37.6517,
            {"Rossoshanskaya ulitsa": 7500, "Biryusinka": 1800, "Universam": 2400},
        ),
        "Biryusinka": (55.581065, 37.64839, {"Universam": 750}),
        "Universam": (
            55.587655,
            37.645687,
            {"Rossoshanskaya ulitsa": 5600, "Biryulyovo Tovarnaya": 900},
        ),
        "Biryulyovo Tovarnaya": (
            55.592028,
            37.653656,
            {"Biryulyovo Passazhirskaya": 1300},
        ),
        "Biryulyovo Passazhirskaya": (
            55.580999,
            37.659164,
            {"Biryulyovo Zapadnoye": 1200},
        ),
        "Rossoshanskaya ulitsa": (55.595579, 37.605757, {}),
        "Prazhskaya": (55.611678, 37.603831, {}),
    }


@pytest.fixture
def moscow_document():
    """테스트용 JSON 요청 문서 (정의 순서가 섞여 있음 => forward reference 포함)"""
    return {
        "base_requests": [
            {
                "type": "Stop",
                "road_distances": {"Marushkino": 3900},
                "longitude": 37.20829,
                "name": "Tolstopaltsevo",
                "latitude": 55.611087,
            },
            {
                "type": "Stop",
                "road_distances": {"Rasskazovka": 9900},
                "longitude": 37.209755,
                "name": "Marushkino",
                "latitude": 55.595884,
            },
            {
                "type": "Bus",
                "name": "256",
                "stops": [
                    "Biryulyovo Zapadnoye",
                    "Biryusinka",
                    "Universam",
                    "Biryulyovo Tovarnaya",
                    "Biryulyovo Passazhirskaya",
                    "Biryulyovo Zapadnoye",
                ],
                "is_roundtrip": True,
            },
            {
                "type": "Bus",
                "name": "750",
                "stops": ["Tolstopaltsevo", "Marushkino", "Rasskazovka"],
                "is_roundtrip": False,
            },
            {
                "type": "Stop",
                "road_distances": {},
                "longitude": 37.333324,
                "name": "Rasskazovka",
                "latitude": 55.632761,
            },
            {
                "type": "Stop",
                "road_distances": {
                    "Rossoshanskaya ulitsa": 7500,
                    "Biryusinka": 1800,
                    "Universam": 2400,
                },
                "longitude": 37.6517,
                "name": "Biryulyovo Zapadnoye",
                "latitude": 55.574371,
            },
            {
                "type": "Stop",
                "road_distances": {"Universam": 750},
                "longitude": 37.64839,
                "name": "Biryusinka",
                "latitude": 55.581065,
            },
            {
                "type": "Stop",
                "road_distances": {
                    "Rossoshanskaya ulitsa": 5600,
                    "Biryulyovo Tovarnaya": 900,
                },
                "longitude": 37.645687,
                "name": "Universam",
                "latitude": 55.587655,
            },
            {
                "type": "Stop",
                "road_distances": {"Biryulyovo Passazhirskaya": 1300},
                "longitude": 37.653656,
                "name": "Biryulyovo Tovarnaya",
                "latitude": 55.592028,
            },
            {
                "type": "Stop",
                "road_distances": {"Biryulyovo Zapadnoye": 1200},
                "longitude": 37.659164,
                "name": "Biryulyovo Passazhirskaya",
                "latitude": 55.580999,
            },
            {
                "type": "Bus",
                "name": "828",
                "stops": [
                    "Biryulyovo Zapadnoye",
                    "Universam",
                    "Rossoshanskaya ulitsa",
                    "Biryulyovo Zapadnoye",
                ],
                "is_roundtrip": True,
            },
            {
                "type": "Stop",
                "road_distances": {},
                "longitude": 37.605757,
                "name": "Rossoshanskaya ulitsa",
                "latitude": 55.595579,
            },
            {
                "type": "Stop",
                "road_distances": {},
                "longitude": 37.603831,
                "name": "Prazhskaya",
                "latitude": 55.611678,
            },
        ],
        "stat_requests": [
            {"type": "Bus", "name": "256", "id": 1965312327},
            {"type": "Bus", "name": "750", "id": 519139350},
            {"type": "Bus", "name": "751", "id": 194217464},
            {"type": "Stop", "name": "Samara", "id": 746888088},
            {"type": "Stop", "name": "Prazhskaya", "id": 65100610},
            {"type": "Stop", "name": "Biryulyovo Zapadnoye", "id": 1042838872},
        ],
    }


@pytest.fixture
def moscow_text():
    """moscow_document와 같은 세션의 텍스트 프로토콜 입력"""
    return "\n".join(
        [
            "13",
            "Stop Tolstopaltsevo: 55.611087, 37.20829, 3900m to Marushkino",
            "Stop Marushkino: 55.595884, 37.209755, 9900m to Rasskazovka",
            "Bus 256: Biryulyovo Zapadnoye > Biryusinka > Universam > "
            "Biryulyovo Tovarnaya > Biryulyovo Passazhirskaya > Biryulyovo Zapadnoye",
            "Bus 750: Tolstopaltsevo - Marushkino - Rasskazovka",
            "Stop Rasskazovka: 55.632761, 37.333324",
            "Stop Biryulyovo Zapadnoye: 55.574371, 37.6517, "
            "7500m to Rossoshanskaya ulitsa, 1800m to Biryusinka, 2400m to Universam",
            "Stop Biryusinka: 55.581065, 37.64839, 750m to Universam",
            "Stop Universam: 55.587655, 37.645687, "
            "5600m to Rossoshanskaya ulitsa, 900m to Biryulyovo Tovarnaya",
            "Stop Biryulyovo Tovarnaya: 55.592028, 37.653656, "
            "1300m to Biryulyovo Passazhirskaya",
            "Stop Biryulyovo Passazhirskaya: 55.580999, 37.659164, "
            "1200m to Biryulyovo Zapadnoye",
            "Bus 828: Biryulyovo Zapadnoye > Universam > Rossoshanskaya ulitsa > "
            "Biryulyovo Zapadnoye",
            "Stop Rossoshanskaya ulitsa: 55.595579, 37.605757",
            "Stop Prazhskaya: 55.611678, 37.603831",
            "6",
            "Bus 256",
            "Bus 750",
            "Bus 751",
            "Stop Samara",
            "Stop Prazhskaya",
            "Stop Biryulyovo Zapadnoye",
        ]
    ) + "\n"


@pytest.fixture
def moscow_text_output():
    """moscow_text 처리 결과"""
    return (
        "Bus 256: 6 stops on route, 5 unique stops, 5950 route length, 1.36124 curvature\n"
        "Bus 750: 5 stops on route, 3 unique stops, 27600 route length, 1.31808 curvature\n"
        "Bus 751: not found\n"
        "Stop Samara: not found\n"
        "Stop Prazhskaya: no buses\n"
        "Stop Biryulyovo Zapadnoye: buses 256 828\n"
    )


@pytest.fixture
def loaded_db(db, moscow_stops):
    """샘플 정류장 + 256/750/828 노선이 등록되고 통계 계산까지 끝난 DB"""
    from transit_db.models.domain import RouteTopology

    for name, (lat, lon, distances) in moscow_stops.items():
        db.add_or_update_stop(name, lat, lon, distances)

    db.add_bus(
        "256",
        [
            "Biryulyovo Zapadnoye",
            "Biryusinka",
            "Universam",
            "Biryulyovo Tovarnaya",
            "Biryulyovo Passazhirskaya",
            "Biryulyovo Zapadnoye",
        ],
        RouteTopology.CIRCULAR,
    )
    db.add_bus(
        "750", ["Tolstopaltsevo", "Marushkino", "Rasskazovka"], RouteTopology.LINEAR
    )
    db.add_bus(
        "828",
        [
            "Biryulyovo Zapadnoye",
            "Universam",
            "Rossoshanskaya ulitsa",
            "Biryulyovo Zapadnoye",
        ],
        RouteTopology.CIRCULAR,
    )
    db.update_all_buses_stats()
    return db
