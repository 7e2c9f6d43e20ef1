# File: users_api/api/deps.py

import logging
from typing import Optional

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader

from users_api.core.config import Settings
from users_api.core.errors import UnauthorizedError
from users_api.core.security import CredentialVerifier, build_verifier

logger = logging.getLogger(__name__)

# Declared as an apiKey scheme so the OpenAPI document advertises it.
# auto_error is off: a missing header must produce our own 401 body.
authorization_header = APIKeyHeader(
    name="Authorization",
    scheme_name="BearerAuth",
    auto_error=False,
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_verifier(config: Settings = Depends(get_app_settings)) -> CredentialVerifier:
    """
    FastAPI dependency returning the credential verifier for this app.

    Override it in app.dependency_overrides to plug in another check
    without touching the handlers.
    """
    return build_verifier(config.auth_mode)


def require_authorization(
    authorization: Optional[str] = Security(authorization_header),
    verifier: CredentialVerifier = Depends(get_verifier),
) -> str:
    """
    Authentication gate for every user route.

    Runs before the handler; on rejection the handler is never called.
    """
    logger.debug("Authorization: %s", authorization)
    if not authorization or not verifier.verify(authorization):
        raise UnauthorizedError()
    return authorization
