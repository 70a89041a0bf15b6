"""
Health endpoint
===============

GET /health -- liveness probe with host name and server time.  Failures to
read either are collected and reported together with a 500.
"""

from __future__ import annotations

import logging
import socket
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from geodist.api.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    errors: list[str] = []

    try:
        timestamp = int(time.time())
    except OSError as exc:
        logger.error("Failed to get current timestamp: %s", exc)
        errors.append(str(exc))
        timestamp = 0

    try:
        hostname = socket.gethostname()
    except OSError as exc:
        logger.error("Failed to get hostname: %s", exc)
        errors.append(str(exc))
        hostname = "unknown"

    if errors:
        body = HealthResponse(
            healthy=False,
            timestamp=timestamp,
            hostname=hostname,
            message=";".join(errors),
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    return HealthResponse(
        healthy=True, timestamp=timestamp, hostname=hostname, message="ok"
    )
