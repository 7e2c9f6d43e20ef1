# File: users_api/core/security.py

"""
Credential verification for the users API.

The gate in api/deps.py only knows about the CredentialVerifier interface.
Two implementations ship:

  - PresenceVerifier: any non-empty Authorization value is accepted. This is
    the legacy behaviour and the default.
  - DummyTokenVerifier: only tokens produced by create_access_token() pass.

Swapping in a real issuer check (JWT, introspection, ...) means adding a
verifier here and selecting it in get_verifier().
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Protocol

from users_api.core.config import Settings, settings

TOKEN_PREFIX = "DUMMY_TOKEN_"
BEARER_PREFIX = "Bearer "


class CredentialVerifier(Protocol):
    def verify(self, credential: str) -> bool:
        ...


class PresenceVerifier:
    def verify(self, credential: str) -> bool:
        return bool(credential)


class DummyTokenVerifier:
    def verify(self, credential: str) -> bool:
        return verify_token(strip_bearer(credential))


def strip_bearer(credential: str) -> str:
    if credential.startswith(BEARER_PREFIX):
        return credential[len(BEARER_PREFIX):].strip()
    return credential.strip()


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    config: Settings = settings,
) -> str:
    """
    Mint an opaque demo token for the given subject.

    The token is DUMMY_TOKEN_<sub>.<expiry as unix seconds>; it is not signed.
    """
    to_encode: dict[str, Any] = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=config.access_token_expire_minutes)
    )
    to_encode["exp"] = int(expire.timestamp())
    return f"{TOKEN_PREFIX}{to_encode.get('sub', 'unknown')}.{to_encode['exp']}"


def verify_token(token: str, now: Optional[datetime] = None) -> bool:
    if not token.startswith(TOKEN_PREFIX):
        return False
    subject, _, exp = token[len(TOKEN_PREFIX):].rpartition(".")
    if not subject or not (exp.isascii() and exp.isdigit()):
        return False
    now = now or datetime.now(timezone.utc)
    return int(exp) > now.timestamp()


def build_verifier(mode: str) -> CredentialVerifier:
    if mode == "dummy_token":
        return DummyTokenVerifier()
    return PresenceVerifier()
