from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from seidoku.api.router import api_router
from seidoku.core.config import Settings, load_settings
from seidoku.core.logging import configure_logging
from seidoku.services.generation import GeminiGenerationService, GenerationService
from seidoku.services.use_cases.analyze import AnalysisController

configure_logging()
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _default_generation_service_factory(api_key: str, settings: Settings) -> GenerationService:
    return GeminiGenerationService.from_settings(api_key, settings)


def create_app(
    settings: Settings | None = None,
    generation_service_factory: Callable[[str, Settings], GenerationService] = _default_generation_service_factory,
) -> FastAPI:
    app_settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "backend_startup",
            extra={
                "status": "ok" if app_settings.gemini_configured else "degraded",
                "environment": app_settings.environment,
                "host": app_settings.host,
                "port": app_settings.port,
                "gemini_model": app_settings.gemini_model,
                "gemini_configured": app_settings.gemini_configured,
                "translation_enabled": app_settings.translation_enabled,
            },
        )
        if not app_settings.gemini_configured:
            logger.warning("backend_gemini_key_missing")
        yield
        app.state.controller.close()

    app = FastAPI(title="Seidoku Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.controller = AnalysisController(
        app_settings.gemini_api_key,
        generation_service_factory=lambda api_key: generation_service_factory(api_key, app_settings),
        translation_enabled=app_settings.translation_enabled,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    def index() -> FileResponse:
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    return app


app = create_app()
