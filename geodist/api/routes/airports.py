"""
Airport endpoints
=================

GET /api/v1/airports/iatas  -- every known IATA code
GET /api/v1/airports/{iata} -- a single airport record
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from geodist.api.dependencies import get_engine
from geodist.api.middleware import limiter
from geodist.api.schemas import AirportResponse, ErrorResponse, UniqueIatasResponse
from geodist.config import settings
from geodist.services.engine import DistanceEngine

router = APIRouter(prefix="/airports", tags=["airports"])


@router.get(
    "/iatas",
    response_model=UniqueIatasResponse,
    summary="List all known airport IATA codes",
    responses={500: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def unique_iatas(
    request: Request,
    engine: DistanceEngine = Depends(get_engine),
):
    return UniqueIatasResponse(iatas=await engine.list_known_codes())


@router.get(
    "/{iata_code}",
    response_model=AirportResponse,
    summary="Get an airport by IATA code",
    responses={500: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def get_airport(
    request: Request,
    iata_code: str,
    engine: DistanceEngine = Depends(get_engine),
):
    airport = await engine.resolve_airport(iata_code)
    if airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")
    return AirportResponse.from_entity(airport)
