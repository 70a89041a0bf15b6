"""
HTTP Basic authentication for the ``/api`` routes.

Credentials come from ``API_USERNAME`` / ``API_PASSWORD``.  When either is
unset every protected request is rejected.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from geodist.config import settings

logger = logging.getLogger(__name__)

REALM = "Access to the API"

_basic = HTTPBasic(realm=REALM, auto_error=False)


@dataclass(frozen=True)
class ApiCredentials:
    username: str
    password: str

    @classmethod
    def from_settings(cls) -> "ApiCredentials":
        return cls(settings.api_username, settings.api_password)

    @property
    def configured(self) -> bool:
        return bool(self.username and self.password)

    def validate(self, supplied: HTTPBasicCredentials) -> bool:
        user_ok = secrets.compare_digest(
            supplied.username.encode(), self.username.encode()
        )
        password_ok = secrets.compare_digest(
            supplied.password.encode(), self.password.encode()
        )
        return user_ok and password_ok


def get_api_credentials() -> ApiCredentials:
    return ApiCredentials.from_settings()


async def require_basic_auth(
    supplied: Optional[HTTPBasicCredentials] = Depends(_basic),
    expected: ApiCredentials = Depends(get_api_credentials),
) -> None:
    if not expected.configured:
        logger.error("API_USERNAME / API_PASSWORD are not set; rejecting request")
    if (
        not expected.configured
        or supplied is None
        or not expected.validate(supplied)
    ):
        logger.warning("Rejected request with missing or invalid credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": f'Basic realm="{REALM}"'},
        )
