# File: users_api/core/errors.py

"""
Error kinds raised by the users API.

All of them are HTTPException subclasses. The auth-flavoured ones
(401, and the 400 while it is still labelled as an auth failure) are
rendered as the bare JSON string "Unauthorization" that existing clients
expect; the others keep FastAPI's {"detail": ...} body.
"""

from typing import Any, Optional

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

UNAUTHORIZED_DETAIL = "Unauthorization"
INVALID_BODY_DETAIL = "Invalid request body"


class UnauthorizedError(HTTPException):
    def __init__(self) -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_DETAIL,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadBodyError(HTTPException):
    """Request body could not be decoded into the expected schema."""

    def __init__(self, errors: Optional[list[dict[str, Any]]] = None, as_auth: bool = True) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=UNAUTHORIZED_DETAIL if as_auth else INVALID_BODY_DETAIL,
        )
        self.as_auth = as_auth
        self.errors = [] if as_auth else (errors or [])


class InvalidPathParamError(HTTPException):
    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"path parameter '{name}' must be an integer, got {value!r}",
        )


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)


async def bad_body_handler(request: Request, exc: BadBodyError) -> JSONResponse:
    if exc.as_auth:
        return JSONResponse(status_code=exc.status_code, content=exc.detail)
    content: dict[str, Any] = {"detail": exc.detail}
    if exc.errors:
        content["errors"] = jsonable_encoder(exc.errors)
    return JSONResponse(status_code=exc.status_code, content=content)
