"""
노선 통계 계산 테스트
"""

import pytest

from transit_db.algorithms.route_stats import (
    RouteStatsCalculator,
    effective_stop_count,
    iter_effective_route,
    iter_route_pairs,
)
from transit_db.db.stop_registry import StopRegistry
from transit_db.models.domain import Bus, RouteTopology


class TestEffectiveRoute:
    """왕복 / 순환 노선 전개 테스트"""

    def test_linear_route_expansion(self):
        route = list(iter_effective_route(["A", "B", "C"], RouteTopology.LINEAR))

        assert route == ["A", "B", "C", "B", "A"]

    def test_circular_route_not_expanded(self):
        route = list(iter_effective_route(["A", "B", "C", "A"], RouteTopology.CIRCULAR))

        assert route == ["A", "B", "C", "A"]

    @pytest.mark.parametrize("n", [1, 2, 3, 7])
    def test_linear_stop_count(self, n):
        stops = [f"S{i}" for i in range(n)]

        assert effective_stop_count(stops, RouteTopology.LINEAR) == 2 * n - 1
        assert len(list(iter_effective_route(stops, RouteTopology.LINEAR))) == 2 * n - 1

    def test_route_pairs(self):
        pairs = list(iter_route_pairs(["A", "B", "C"], RouteTopology.LINEAR))

        assert pairs == [("A", "B"), ("B", "C"), ("C", "B"), ("B", "A")]

    def test_single_stop_has_no_pairs(self):
        assert list(iter_route_pairs(["A"], RouteTopology.CIRCULAR)) == []


class TestRouteStatsCalculator:
    """RouteStatsCalculator 테스트 클래스"""

    @pytest.fixture
    def registry(self):
        registry = StopRegistry()
        registry.define_stop("A", 55.60, 37.20, {"B": 2000})
        registry.define_stop("B", 55.61, 37.20, {"C": 1500, "A": 2100})
        registry.define_stop("C", 55.62, 37.20, {})
        return registry

    @pytest.fixture
    def calculator(self, registry):
        return RouteStatsCalculator(registry, registry.road_graph)

    def test_linear_route_length_uses_fallback(self, calculator):
        """A→B 2000, B→C 1500, C→B (fallback) 1500, B→A 2100"""
        stats = calculator.compute(Bus("1", ["A", "B", "C"], RouteTopology.LINEAR))

        assert stats.stop_count == 5
        assert stats.unique_stop_count == 3
        assert stats.route_length == 2000 + 1500 + 1500 + 2100
        assert stats.error is None
        assert stats.is_valid

    def test_curvature(self, calculator):
        stats = calculator.compute(Bus("1", ["A", "B", "C"], RouteTopology.LINEAR))

        assert stats.curvature == pytest.approx(stats.route_length / stats.geo_length)
        # 남북으로 0.01도씩 => 약 1112m 구간 4개
        assert stats.geo_length == pytest.approx(4 * 1111.95, rel=1e-3)

    def test_unique_stops_on_ring(self, calculator):
        stats = calculator.compute(Bus("2", ["A", "B", "A"], RouteTopology.CIRCULAR))

        assert stats.stop_count == 3
        assert stats.unique_stop_count == 2
        assert stats.route_length == 2000 + 2100
        assert stats.unique_stop_count <= stats.stop_count

    def test_missing_distance_is_reported(self, calculator):
        """A↔C 거리 없음 => 배치 중단 없이 error 기록"""
        stats = calculator.compute(Bus("3", ["A", "C"], RouteTopology.LINEAR))

        assert stats.route_length is None
        assert stats.curvature is None
        assert stats.error == "missing distance"
        assert stats.stop_count == 3

    def test_undefined_stop_is_reported(self, registry, calculator):
        """좌표 없는 정류장 => 곡률 계산 불가"""
        registry.define_stop("C", 55.62, 37.20, {"D": 500})

        stats = calculator.compute(Bus("4", ["C", "D"], RouteTopology.LINEAR))

        assert stats.route_length == 1000
        assert stats.curvature is None
        assert stats.error == "undefined stop"

    def test_degenerate_curvature(self, calculator):
        """정류장 하나짜리 순환 노선 => 직선 거리 0"""
        stats = calculator.compute(Bus("5", ["A"], RouteTopology.CIRCULAR))

        assert stats.stop_count == 1
        assert stats.route_length == 0
        assert stats.curvature is None
        assert stats.error == "degenerate curvature"

    def test_curvature_below_one_is_not_rejected(self, registry, calculator):
        """비현실적인 데이터도 검증하지 않고 그대로 보고"""
        registry.define_stop("A", 55.60, 37.20, {"B": 10})

        stats = calculator.compute(Bus("6", ["A", "B", "A"], RouteTopology.CIRCULAR))

        assert stats.route_length == 10 + 2100
        assert stats.curvature < 1.0
        assert stats.error is None

    def test_uses_injected_distance_calculator(self, registry, mocker):
        mock_calc = mocker.MagicMock()
        mock_calc.calculate_distance.return_value = 1000.0
        calculator = RouteStatsCalculator(registry, registry.road_graph, mock_calc)

        stats = calculator.compute(Bus("7", ["A", "B"], RouteTopology.LINEAR))

        assert stats.geo_length == 2000.0
        assert stats.curvature == pytest.approx((2000 + 2100) / 2000.0)
        assert mock_calc.calculate_distance.call_count == 2
