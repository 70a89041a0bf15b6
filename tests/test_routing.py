"""Unit tests for route aggregation."""

import pytest

from geodist.domain.distance import DistanceCalculator, create_calculator
from geodist.domain.entities import Coordinates, RoutePoint
from geodist.domain.enums import Datum, Formula
from geodist.domain.errors import ConvergenceFailure, InvalidRoute
from geodist.domain.routing import aggregate_route


def route(*pairs) -> list[RoutePoint]:
    return [RoutePoint(Coordinates(lat, lon)) for lat, lon in pairs]


class _FailingCalculator(DistanceCalculator):
    """Returns 1 km per leg and fails on the leg with index *fail_at*."""

    formula = Formula.VINCENTY

    def __init__(self, fail_at: int):
        self.fail_at = fail_at
        self.calls = 0

    def calculate(self, start, end):
        leg = self.calls
        self.calls += 1
        if leg == self.fail_at:
            raise ConvergenceFailure("Failed to converge after 200 iterations")
        return 1.0


class TestAggregateRoute:
    def test_great_circle_route(self):
        calculator = create_calculator(Formula.GREAT_CIRCLE, Datum.WGS84)
        result = aggregate_route(route((0, 0), (0, 1), (1, 1), (2, 4)), calculator)

        distances = [leg.distance for leg in result.legs]
        assert len(distances) == 3
        assert abs(distances[0] - 111.3194907) < 1e-6
        assert abs(distances[1] - 111.3194907) < 1e-6
        assert abs(distances[2] - 351.9105211) < 1e-6
        assert abs(result.total_distance - 574.5495025) < 1e-6

    def test_vincenty_route(self):
        calculator = create_calculator(Formula.VINCENTY, Datum.WGS84)
        result = aggregate_route(route((0, 0), (0, 1), (1, 1), (2, 4)), calculator)

        distances = [leg.distance for leg in result.legs]
        assert abs(distances[0] - 111.3194907) < 1e-6
        assert abs(distances[1] - 110.5743885) < 1e-6
        assert abs(distances[2] - 351.6765004) < 1e-6

    def test_legs_follow_point_order(self):
        points = route((0, 0), (0, 1), (1, 1))
        calculator = create_calculator(Formula.HAVERSINE, Datum.WGS84)
        result = aggregate_route(points, calculator)

        assert [(leg.start, leg.end) for leg in result.legs] == [
            (points[0], points[1]),
            (points[1], points[2]),
        ]

    def test_total_is_sum_of_legs(self):
        calculator = create_calculator(Formula.HAVERSINE, Datum.NAD27)
        result = aggregate_route(route((10, 10), (11, 12), (-5, 30)), calculator)
        assert result.total_distance == pytest.approx(
            sum(leg.distance for leg in result.legs)
        )

    def test_keeps_airport_codes(self):
        points = [
            RoutePoint(Coordinates(50.077778, 19.784722), "KRK"),
            RoutePoint(Coordinates(52.165833, 20.967222), "WAW"),
        ]
        calculator = create_calculator(Formula.GREAT_CIRCLE, Datum.WGS84)
        leg = aggregate_route(points, calculator).legs[0]
        assert (leg.start.iata_code, leg.end.iata_code) == ("KRK", "WAW")

    def test_failing_leg_fails_whole_route(self):
        calculator = create_calculator(Formula.VINCENTY, Datum.WGS84)
        with pytest.raises(ConvergenceFailure):
            aggregate_route(route((0, 1), (0, 0), (0.5, 179.7), (1, 1)), calculator)

    def test_stops_at_first_failure(self):
        calculator = _FailingCalculator(fail_at=1)
        with pytest.raises(ConvergenceFailure) as exc_info:
            aggregate_route(route((0, 0), (0, 1), (0, 2), (0, 3)), calculator)

        assert calculator.calls == 2
        assert str(exc_info.value) == "Failed to converge after 200 iterations"

    @pytest.mark.parametrize("points", [[], route((0, 0))])
    def test_needs_two_points(self, points):
        calculator = create_calculator(Formula.GREAT_CIRCLE, Datum.WGS84)
        with pytest.raises(InvalidRoute):
            aggregate_route(points, calculator)
