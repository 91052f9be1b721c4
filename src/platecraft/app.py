from __future__ import annotations

import asyncio
import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from platecraft.shared.config.settings import settings
from platecraft.shared.logging.logger import setup_logging
from platecraft.shared.auth.google_credentials import GoogleCredentialProvider

from platecraft.shared.api.health import router as health_router
from platecraft.features.food_images.api.routes import router as food_images_router
from platecraft.features.food_images.infra.vertex_imagen import ImagenClient

log = logging.getLogger("app")


def _split_or_star(value: str) -> list:
    if value and value != "*":
        return [v.strip() for v in value.split(",")]
    return ["*"]


def create_app(credentials=None, imagen_client=None) -> FastAPI:
    setup_logging()
    app = FastAPI(title="Platecraft", version="1.0.0")

    app.state.credentials = credentials or GoogleCredentialProvider()
    app.state.imagen_client = imagen_client or ImagenClient(app.state.credentials)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split_or_star(settings.CORS_ALLOW_ORIGINS),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=_split_or_star(settings.CORS_ALLOW_METHODS),
        allow_headers=_split_or_star(settings.CORS_ALLOW_HEADERS),
    )

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
        )

    # Routers
    app.include_router(health_router,      prefix="/api")
    app.include_router(food_images_router, prefix="/api")

    @app.on_event("startup")
    async def _on_startup():
        ok = await asyncio.to_thread(app.state.credentials.initialize)
        if not ok:
            log.error("Failed to initialize authentication. Server will start but image generation will not work.")

    return app

# Uvicorn/Gunicorn entry point
app = create_app()
