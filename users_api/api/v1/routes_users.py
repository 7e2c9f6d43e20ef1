# File: users_api/api/v1/routes_users.py

"""
User resource routes.

Nothing here is persisted: list returns a canned set, get echoes the id,
add echoes the submitted id with placeholder credentials and delete only
acknowledges the id.
"""

import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from users_api.api.deps import get_app_settings, require_authorization
from users_api.core.config import Settings
from users_api.core.errors import BadBodyError, InvalidPathParamError
from users_api.schemas.user import INT64_MAX, INT64_MIN, User

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_authorization)])

INT_RE = re.compile(r"[+-]?[0-9]+")

SAVED_USERNAME = "saved_mertcakmak"
SAVED_PASSWORD = "saved_password"


def parse_user_id(raw: str) -> Optional[int]:
    """
    Parse a path id as a signed base-10 integer.

    Returns None when the text is not an integer. Values outside the 64-bit
    range are clamped to it.
    """
    if not INT_RE.fullmatch(raw):
        return None
    return max(INT64_MIN, min(INT64_MAX, int(raw)))


@router.get(
    "",
    response_model=list[User],
    summary="Get all users.",
)
def find_users():
    return [
        User(id=1, username="user1", password="password"),
        User(id=2, username="user2", password="password"),
        User(id=3, username="user3", password="password"),
    ]


@router.get(
    "/{id}",
    response_model=User,
    summary="Find User by id.",
)
def find_user_by_id(
    id: str = Path(description="User ID", json_schema_extra={"type": "integer"}),
    config: Settings = Depends(get_app_settings),
):
    """
    Echo the requested id back in a fixed user record.

    A non-numeric id is read as 0 unless strict_id_params is set, in which
    case it is rejected with 422.
    """
    user_id = parse_user_id(id)
    if user_id is None:
        if config.strict_id_params:
            raise InvalidPathParamError("id", id)
        user_id = 0
    return User(id=user_id, username="mertcakmak", password="password")


@router.post(
    "",
    response_model=User,
    summary="Add an user",
    openapi_extra={
        "requestBody": {
            "description": "Add user",
            "required": True,
            "content": {
                "application/json": {"schema": {"$ref": "#/components/schemas/User"}},
            },
        },
    },
)
async def add_user(request: Request, config: Settings = Depends(get_app_settings)):
    # The body is decoded by hand: a bad body is a 400, not FastAPI's 422.
    raw = await request.body()
    try:
        payload = User.model_validate_json(raw)
    except ValidationError as exc:
        logger.info("Rejected user body: %d error(s)", exc.error_count())
        raise BadBodyError(
            exc.errors(include_url=False, include_context=False),
            as_auth=config.label_body_errors_as_auth,
        )

    return User(id=payload.id, username=SAVED_USERNAME, password=SAVED_PASSWORD)


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an user",
    responses={200: {"description": "Deletion message (delete_echo_message enabled)"}},
)
def delete_user_by_id(
    id: str = Path(description="User ID", json_schema_extra={"type": "integer"}),
    config: Settings = Depends(get_app_settings),
):
    message = f"deleted user: {id}"
    logger.info(message)
    if config.delete_echo_message:
        return JSONResponse(status_code=status.HTTP_200_OK, content=message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
