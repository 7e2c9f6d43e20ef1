# File: users_api/schemas/user.py

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class User(BaseModel):
    # Strict so that {"id": "5"} is rejected like a typed JSON decoder would;
    # missing fields fall back to zero values.
    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "example": {"id": 1, "username": "user1", "password": "password"},
        },
    )

    id: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    username: str = ""
    password: str = ""

    @model_validator(mode="before")
    @classmethod
    def bind_fields(cls, data: Any) -> Any:
        """
        Bind keys the way clients of the old service relied on.

        A null body and null values leave zero values in place; keys match
        field names case-insensitively, the last matching key wins and
        unknown keys are dropped.
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        bound: dict[str, Any] = {}
        for key, value in data.items():
            name = str(key).casefold()
            if name in cls.model_fields and value is not None:
                bound[name] = value
        return bound
