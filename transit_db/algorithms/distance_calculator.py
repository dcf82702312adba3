import math
from typing import Dict, Tuple


class DistanceCalculator:
    EARTH_RADIUS = 6371000  # meters

    def __init__(self):
        # 세션 메모리 캐시 => 프로세스 종료 시 폐기
        self.cache: Dict[Tuple[float, float, float, float], float] = {}

    def calculate_distance(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> float:
        """두 좌표 간 거리 계산(meter)"""
        return self.great_circle((lat1, lon1), (lat2, lon2))

    def great_circle(
        self, coord1: Tuple[float, float], coord2: Tuple[float, float]
    ) -> float:
        """구면 코사인 법칙으로 지구의 곡률 고려하여 두 좌표 간 거리 계산"""
        lat1, lon1 = coord1
        lat2, lon2 = coord2

        if coord1 == coord2:
            return 0.0

        # create cache key
        cache_key = (lat1, lon1, lat2, lon2)
        if cache_key in self.cache:
            return self.cache[cache_key]

        # radian convertion
        lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

        # spherical law of cosines
        cos_angle = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(
            lat2
        ) * math.cos(abs(lon1 - lon2))
        # 부동소수 오차로 [-1, 1] 범위를 벗어나면 acos가 ValueError
        cos_angle = max(-1.0, min(1.0, cos_angle))
        distance = self.EARTH_RADIUS * math.acos(cos_angle)

        # save cache
        self.cache[cache_key] = distance

        return distance

    def clear_cache(self):
        self.cache.clear()


_distance_calculator = DistanceCalculator()


def great_circle_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    return _distance_calculator.calculate_distance(lat1, lon1, lat2, lon2)
