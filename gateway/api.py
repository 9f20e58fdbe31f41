# -*- coding: utf-8 -*-
"""
Credential-injecting API gateway.

Forwards front-end requests to OpenAI and Nutritionix with server-side keys and
relays the upstream JSON, or an error envelope, back to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .chat.api import router as chat_router
from .config import Settings
from .faults import bad_request, envelope_response
from .nutrition.api import router as nutrition_router

logger = logging.getLogger(__name__)

STRICT_METHODS = ["GET", "POST", "OPTIONS"]
STRICT_HEADERS = ["Content-Type", "Authorization"]


def _validation_summary(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def _add_cors(app: FastAPI, settings: Settings) -> None:
    if settings.cors_open:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
        return
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=STRICT_METHODS,
        allow_headers=STRICT_HEADERS,
    )


def create_app(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the gateway app.

    ``transport`` replaces the network transport of every outbound httpx client;
    tests pass an ``httpx.MockTransport`` here.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="API Gateway",
        description="Forwards chat and nutrition requests with server-side credentials",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings
    app.state.transport = transport

    _add_cors(app, settings)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return envelope_response(bad_request("Invalid request body", details=_validation_summary(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.get("/", summary="Liveness probe")
    @app.get("/api/health", summary="Liveness probe")
    async def health() -> dict:
        return {"status": "ok", "message": "Backend is running"}

    app.include_router(chat_router)
    app.include_router(nutrition_router)
    return app


load_dotenv()
app = create_app()


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level)
