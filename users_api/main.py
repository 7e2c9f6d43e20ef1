# users_api/main.py

from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from users_api.api.v1.api import api_router
from users_api.core.config import Settings, settings
from users_api.core.errors import (
    BadBodyError,
    UnauthorizedError,
    bad_body_handler,
    unauthorized_handler,
)
from users_api.core.logging import RequestLoggingMiddleware, configure_logging

SWAGGER_UI_URL = "/swagger/index.html"
SWAGGER_DOC_URL = "/swagger/doc.json"


def create_application(config: Optional[Settings] = None) -> FastAPI:
    config = config or settings
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        description=config.DESCRIPTION,
        terms_of_service=config.TERMS_OF_SERVICE,
        contact={
            "name": "API Support",
            "url": "http://www.swagger.io/support",
            "email": "support@swagger.io",
        },
        license_info={
            "name": "Apache 2.0",
            "url": "http://www.apache.org/licenses/LICENSE-2.0.html",
        },
        docs_url=SWAGGER_UI_URL,
        openapi_url=SWAGGER_DOC_URL,
        redoc_url=None,
    )
    app.state.settings = config

    # ---------- MIDDLEWARE ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(BadBodyError, bad_body_handler)

    # ---------- DOCS ----------
    @app.get("/swagger", include_in_schema=False)
    @app.get("/swagger/", include_in_schema=False)
    def swagger_root():
        return RedirectResponse(url=SWAGGER_UI_URL)

    @app.get("/healthz", include_in_schema=False)
    def healthz():
        return {"status": "ok"}

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=config.api_v1_prefix)

    return app


app = create_application()


def run() -> None:
    # uvicorn exits the process if the port cannot be bound
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
