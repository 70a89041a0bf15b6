"""
FastAPI application factory.

* Registers the distance and airport routes behind HTTP Basic auth and an
  unauthenticated health probe.
* Builds one ``DistanceEngine`` per app; its airport caches live as long
  as the app and the database engine is disposed on shutdown.
* Maps domain errors to HTTP responses.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from geodist.api.auth import require_basic_auth
from geodist.api.middleware import limiter
from geodist.api.routes import airports, distance, health
from geodist.config import settings
from geodist.domain.errors import (
    ConvergenceFailure,
    InvalidRoute,
    MissingAirports,
    StoreFault,
)
from geodist.infrastructure.database import async_session_factory, engine
from geodist.infrastructure.repositories import AirportStore, CachedAirportRepository
from geodist.services.engine import DistanceEngine

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Dispose the database engine on shutdown."""
    yield
    await engine.dispose()


def build_engine() -> DistanceEngine:
    store = AirportStore(async_session_factory)
    return DistanceEngine(CachedAirportRepository(store))


# ── Error handlers ────────────────────────────────────────────────────


async def _validation_error(request: Request, exc: RequestValidationError):
    logger.warning("Failed to validate request: %s", exc.errors())
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(
            {"error": "Invalid request", "details": {"errors": exc.errors()}}
        ),
    )


async def _invalid_route(request: Request, exc: InvalidRoute):
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _convergence_failure(request: Request, exc: ConvergenceFailure):
    return JSONResponse(status_code=422, content={"error": str(exc)})


async def _missing_airports(request: Request, exc: MissingAirports):
    return JSONResponse(
        status_code=422,
        content={
            "error": "Some airports are missing in our database",
            "details": {"missing_airports": exc.codes},
        },
    )


async def _store_fault(request: Request, exc: StoreFault):
    return JSONResponse(status_code=500, content={"error": "Database fail"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Geodesic Distance API",
        description=(
            "Calculates distances along routes of coordinates or airports "
            "using Great Circle, Haversine or Vincenty formulas on the "
            "WGS84, NAD27 or NAD83 datums."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.engine = build_engine()

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(InvalidRoute, _invalid_route)
    app.add_exception_handler(ConvergenceFailure, _convergence_failure)
    app.add_exception_handler(MissingAirports, _missing_airports)
    app.add_exception_handler(StoreFault, _store_fault)

    # Routers
    app.include_router(health.router)
    protected = [Depends(require_basic_auth)]
    app.include_router(distance.router, prefix="/api/v1", dependencies=protected)
    app.include_router(airports.router, prefix="/api/v1", dependencies=protected)

    return app
