"""
Distance endpoints
==================

POST /api/v1/calculate_distance/coordinates -- route over raw coordinates
POST /api/v1/calculate_distance/airports    -- route over IATA codes
"""

from fastapi import APIRouter, Depends, Request

from geodist.api.dependencies import get_engine
from geodist.api.middleware import limiter
from geodist.api.schemas import (
    AirportDistanceRequest,
    AirportDistanceResponse,
    CoordinatesDistanceRequest,
    CoordinatesDistanceResponse,
    ErrorResponse,
)
from geodist.config import settings
from geodist.domain.entities import Coordinates
from geodist.services.engine import DistanceEngine

router = APIRouter(prefix="/calculate_distance", tags=["distance"])


@router.post(
    "/coordinates",
    response_model=CoordinatesDistanceResponse,
    summary="Calculate the distance along a route of coordinates",
    responses={422: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def coordinates_distance(
    request: Request,
    body: CoordinatesDistanceRequest,
    engine: DistanceEngine = Depends(get_engine),
):
    points = [Coordinates(p.latitude, p.longitude) for p in body.route]
    result = engine.calculate_route(points, body.formula, body.datum)
    return CoordinatesDistanceResponse.from_result(result, body.formula, body.datum)


@router.post(
    "/airports",
    response_model=AirportDistanceResponse,
    summary="Calculate the distance along a route of airports",
    responses={
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@limiter.limit(settings.rate_limit)
async def airports_distance(
    request: Request,
    body: AirportDistanceRequest,
    engine: DistanceEngine = Depends(get_engine),
):
    result = await engine.calculate_airport_route(
        body.route, body.formula, body.datum
    )
    return AirportDistanceResponse.from_result(result, body.formula, body.datum)
