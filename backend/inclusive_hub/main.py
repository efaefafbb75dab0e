"""Application entry point for the Inclusive Marketing Hub API service."""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from loguru import logger

from inclusive_hub.api.routes.bias import router as bias_router
from inclusive_hub.api.routes.campaigns import router as campaigns_router
from inclusive_hub.api.routes.copywriting import router as copy_router
from inclusive_hub.api.routes.stats import router as stats_router
from inclusive_hub.core.config import settings
from inclusive_hub.core.errors import init_exception_handlers
from inclusive_hub.core.logging import setup_logging
from inclusive_hub.core.middleware import BodySizeLimitMiddleware, RequestContextLogMiddleware
from inclusive_hub.schemas.common import utc_now_iso
from inclusive_hub.services.kolosal import KolosalClient
from inclusive_hub.services.mock_data import MockDataGenerator
from inclusive_hub.services.store import PersonaStore


def _cors_origins() -> list[str]:
    if settings.ENV == "prod":
        if not settings.CORS_ALLOWED_ORIGINS:
            raise RuntimeError("CORS_ALLOWED_ORIGINS must be configured for prod")
        return settings.CORS_ALLOWED_ORIGINS
    return settings.CORS_ALLOWED_ORIGINS or ["http://localhost:5173"]


def create_app(
    generator: Optional[MockDataGenerator] = None,
    store: Optional[PersonaStore] = None,
    kolosal: Optional[KolosalClient] = None,
) -> FastAPI:
    """Build the API with a freshly seeded generator, persona store and upstream client.

    The upstream client is shared by every request and closed on shutdown; it is
    ``None`` in mock mode.
    """

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)

    app.state.generator = generator or MockDataGenerator(seed=settings.MOCK_SEED)
    app.state.store = store or PersonaStore(app.state.generator.personas(settings.INITIAL_PERSONAS))
    app.state.kolosal = kolosal or KolosalClient.from_settings(settings)

    init_exception_handlers(app)

    app.add_middleware(RequestContextLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )
    app.add_middleware(BodySizeLimitMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.on_event("startup")
    async def startup_event():
        logger.bind(
            mode=settings.mode,
            personas=len(app.state.store),
            port=settings.PORT,
        ).info("service_started")

    @app.on_event("shutdown")
    async def shutdown_event():
        if app.state.kolosal is not None:
            app.state.kolosal.close()

    @app.get("/health", tags=["system"], summary="Liveness probe")
    def health(request: Request) -> dict[str, Any]:
        """Process status and which upstream mode is active."""

        return {
            "status": "ok",
            "timestamp": utc_now_iso(),
            "kolosalApiKey": "configured" if settings.kolosal_api_key_configured else "missing",
            "kolosalApiUrl": settings.KOLOSAL_API_URL,
            "mode": settings.mode,
            "personas": len(request.app.state.store),
        }

    app.include_router(campaigns_router, prefix="/api")
    app.include_router(bias_router, prefix="/api")
    app.include_router(copy_router, prefix="/api")
    app.include_router(stats_router, prefix="/api")

    return app


setup_logging()

app = create_app()
