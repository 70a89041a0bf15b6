"""
Domain value objects.

Everything here is immutable: airports come from a read-only dataset and
route legs are produced fresh for each calculation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class RoutePoint:
    """A route stop: coordinates, optionally tagged with the airport code."""

    coordinates: Coordinates
    iata_code: Optional[str] = None


@dataclass(frozen=True)
class Airport:
    id: int
    icao_code: str
    iata_code: str
    name: str
    city: str
    country: str
    # Sexagesimal fields are kept for provenance; only the decimal
    # coordinates are used for distance calculations.
    lat_deg: int
    lat_min: int
    lat_sec: int
    lat_dir: str
    lon_deg: int
    lon_min: int
    lon_sec: int
    lon_dir: str
    altitude: int
    lat_decimal: float
    lon_decimal: float

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(self.lat_decimal, self.lon_decimal)

    def as_route_point(self) -> RoutePoint:
        return RoutePoint(self.coordinates, self.iata_code)


# ── Route results ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class RouteLeg:
    start: RoutePoint
    end: RoutePoint
    distance: float


@dataclass(frozen=True)
class RouteResult:
    legs: list[RouteLeg] = field(default_factory=list)
    total_distance: float = 0.0
