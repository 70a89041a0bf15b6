"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from geodist.domain.entities import Airport, RouteLeg, RoutePoint, RouteResult
from geodist.domain.enums import DEFAULT_DATUM, DEFAULT_FORMULA, Datum, Formula


# ── Shared ────────────────────────────────────────────────────────────


class CoordinatesSchema(BaseModel):
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


# ── Requests ──────────────────────────────────────────────────────────


class CoordinatesDistanceRequest(BaseModel):
    route: list[CoordinatesSchema] = Field(..., min_length=2)
    formula: Formula = DEFAULT_FORMULA
    datum: Datum = DEFAULT_DATUM


class AirportDistanceRequest(BaseModel):
    route: list[str] = Field(
        ...,
        min_length=2,
        description="IATA codes of the airports, in travel order.",
    )
    formula: Formula = DEFAULT_FORMULA
    datum: Datum = DEFAULT_DATUM


# ── Responses ─────────────────────────────────────────────────────────


class CoordinatesRoutePart(BaseModel):
    from_: CoordinatesSchema = Field(..., alias="from")
    to: CoordinatesSchema
    distance: float

    model_config = {"populate_by_name": True}

    @classmethod
    def from_leg(cls, leg: RouteLeg) -> "CoordinatesRoutePart":
        return cls(
            from_=CoordinatesSchema.model_validate(leg.start.coordinates),
            to=CoordinatesSchema.model_validate(leg.end.coordinates),
            distance=leg.distance,
        )


class CoordinatesDistanceResponse(BaseModel):
    distances: list[CoordinatesRoutePart]
    formula: Formula
    datum: Datum
    total_distance: float

    @classmethod
    def from_result(
        cls, result: RouteResult, formula: Formula, datum: Datum
    ) -> "CoordinatesDistanceResponse":
        return cls(
            distances=[CoordinatesRoutePart.from_leg(leg) for leg in result.legs],
            formula=formula,
            datum=datum,
            total_distance=result.total_distance,
        )


class AirportCoordinates(BaseModel):
    iata_code: str
    coordinates: CoordinatesSchema

    @classmethod
    def from_point(cls, point: RoutePoint) -> "AirportCoordinates":
        return cls(
            iata_code=point.iata_code or "",
            coordinates=CoordinatesSchema.model_validate(point.coordinates),
        )


class AirportRoutePart(BaseModel):
    from_: AirportCoordinates = Field(..., alias="from")
    to: AirportCoordinates
    distance: float

    model_config = {"populate_by_name": True}


class AirportDistanceResponse(BaseModel):
    distances: list[AirportRoutePart]
    formula: Formula
    datum: Datum
    total_distance: float

    @classmethod
    def from_result(
        cls, result: RouteResult, formula: Formula, datum: Datum
    ) -> "AirportDistanceResponse":
        return cls(
            distances=[
                AirportRoutePart(
                    from_=AirportCoordinates.from_point(leg.start),
                    to=AirportCoordinates.from_point(leg.end),
                    distance=leg.distance,
                )
                for leg in result.legs
            ],
            formula=formula,
            datum=datum,
            total_distance=result.total_distance,
        )


class AirportResponse(BaseModel):
    id: int
    icao_code: str
    iata_code: str
    name: str
    city: str
    country: str
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

    model_config = {"from_attributes": True}

    @classmethod
    def from_entity(cls, airport: Airport) -> "AirportResponse":
        return cls.model_validate(airport)


class UniqueIatasResponse(BaseModel):
    iatas: list[str]


class HealthResponse(BaseModel):
    healthy: bool
    timestamp: int
    hostname: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[dict[str, Any]] = None
