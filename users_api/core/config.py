# File: users_api/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    # Basic app info (also rendered into the OpenAPI document)
    PROJECT_NAME: str = "Gin Swagger Example API"
    VERSION: str = "2.0"
    DESCRIPTION: str = "This is a sample server server."
    TERMS_OF_SERVICE: str = "http://swagger.io/terms/"

    api_v1_prefix: str = "/api/v1"

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = [
        "http://localhost:8080",
        "http://127.0.0.1:8080",
    ]

    # Auth gate: "presence" only checks the header exists,
    # "dummy_token" also checks it was minted by create_access_token()
    auth_mode: str = os.getenv("AUTH_MODE", "presence")
    access_token_expire_minutes: int = 60 * 24  # 24h

    # Legacy quirks, kept on by default
    strict_id_params: bool = False  # False: non-numeric ids become 0
    label_body_errors_as_auth: bool = True  # 400 body reads "Unauthorization"
    delete_echo_message: bool = False  # True: DELETE answers 200 + message

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("auth_mode")
    @classmethod
    def check_auth_mode(cls, v: str) -> str:
        if v not in ("presence", "dummy_token"):
            raise ValueError(f"unknown auth_mode {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
