"""FastAPI dependency injection helpers."""

from fastapi import Request

from geodist.services.engine import DistanceEngine


def get_engine(request: Request) -> DistanceEngine:
    """Return the process-wide engine (and its airport caches)."""
    return request.app.state.engine
