"""
Distance engine facade
======================

High-level API used by the HTTP layer:

* ``calculate_route``          -- distances along raw coordinates.
* ``calculate_airport_route``  -- resolves IATA codes first, then the same.
* ``resolve_airport`` / ``list_known_codes`` -- cached airport lookups.

Airport codes of one route are resolved concurrently.  Any unknown code
fails the request with ``MissingAirports`` listing all of them; a store
fault on any lookup propagates as ``StoreFault``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Sequence, Union

from geodist.domain.distance import create_calculator
from geodist.domain.entities import Airport, Coordinates, RoutePoint, RouteResult
from geodist.domain.enums import DEFAULT_DATUM, DEFAULT_FORMULA, Datum, Formula
from geodist.domain.errors import MissingAirports
from geodist.domain.routing import aggregate_route, ensure_route_length
from geodist.infrastructure.repositories import CachedAirportRepository

logger = logging.getLogger(__name__)


def normalize_code(iata_code: str) -> str:
    return (iata_code or "").strip().upper()


class DistanceEngine:
    def __init__(self, airports: CachedAirportRepository):
        self.airports = airports

    def calculate_route(
        self,
        points: Sequence[Union[Coordinates, RoutePoint]],
        formula: Formula = DEFAULT_FORMULA,
        datum: Datum = DEFAULT_DATUM,
    ) -> RouteResult:
        ensure_route_length(points)
        route = [
            p if isinstance(p, RoutePoint) else RoutePoint(coordinates=p)
            for p in points
        ]
        return aggregate_route(route, create_calculator(formula, datum))

    async def calculate_airport_route(
        self,
        iata_codes: Sequence[str],
        formula: Formula = DEFAULT_FORMULA,
        datum: Datum = DEFAULT_DATUM,
    ) -> RouteResult:
        ensure_route_length(iata_codes)

        airports = await asyncio.gather(
            *(self.resolve_airport(code) for code in iata_codes)
        )
        missing = [
            code for code, airport in zip(iata_codes, airports) if airport is None
        ]
        if missing:
            for code in missing:
                logger.warning("Missing airport: %s", code)
            raise MissingAirports(missing)

        return self.calculate_route(
            [airport.as_route_point() for airport in airports], formula, datum
        )

    async def resolve_airport(self, iata_code: str) -> Optional[Airport]:
        return await self.airports.resolve(normalize_code(iata_code))

    async def list_known_codes(self) -> list[str]:
        return await self.airports.list_codes()
