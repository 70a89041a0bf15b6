"""
Route aggregation.

Turns an ordered list of stops into consecutive legs: leg *i* joins stop
*i* and stop *i + 1*.  The first leg whose calculation fails aborts the
whole route and its exception propagates unchanged, so no partial leg
list is ever returned.

Complexity: O(n) calculator calls for n stops.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .distance import DistanceCalculator
from .entities import RouteLeg, RoutePoint, RouteResult
from .errors import GeodistError, InvalidRoute

logger = logging.getLogger(__name__)

MIN_ROUTE_POINTS = 2


def ensure_route_length(points: Sequence) -> None:
    """Reject routes that cannot form a single leg."""
    if len(points) < MIN_ROUTE_POINTS:
        raise InvalidRoute(
            f"A route needs at least {MIN_ROUTE_POINTS} points, got {len(points)}"
        )


def aggregate_route(
    points: Sequence[RoutePoint], calculator: DistanceCalculator
) -> RouteResult:
    ensure_route_length(points)

    legs: list[RouteLeg] = []
    for start, end in zip(points, points[1:]):
        try:
            distance = calculator.calculate(start.coordinates, end.coordinates)
        except GeodistError as exc:
            logger.warning(
                "Failed to calculate %s distance: %s, from: %s, to: %s",
                calculator.formula.value,
                exc,
                start,
                end,
            )
            raise
        legs.append(RouteLeg(start=start, end=end, distance=distance))

    return RouteResult(legs=legs, total_distance=sum(leg.distance for leg in legs))
