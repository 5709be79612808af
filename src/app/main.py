# src/app/main.py
from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from src.app.config import Settings, settings as default_settings
from src.app.infra.transport.base import Transport
from src.app.infra.transport.httpx_transport import HttpxTransport
from src.app.routers.recipes import router as recipes_router
from src.services.image_cache import ImageCache
from src.services.image_loader import ImageLoader
from src.services.recipe_service import RecipeService
from src.services.recipe_state import RecipeListState

# Plain stdout logging, enough for dev and containers
logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

log = logging.getLogger("app")


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[Transport] = None,
) -> FastAPI:
    settings = settings or default_settings
    owned_transport: Optional[HttpxTransport] = None
    if transport is None:
        owned_transport = HttpxTransport(timeout=settings.HTTP_TIMEOUT_SECONDS)
        transport = owned_transport

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("Serving recipes from %s (env=%s)", settings.RECIPES_BASE_URL, settings.APP_ENV)
        try:
            yield
        finally:
            if owned_transport is not None:
                await owned_transport.aclose()

    app = FastAPI(title="Recipe Browser", version="0.1.0", lifespan=lifespan)

    service = RecipeService(transport, base_url=settings.RECIPES_BASE_URL)
    image_cache = ImageCache()
    app.state.recipe_service = service
    app.state.recipe_state = RecipeListState(service)
    app.state.image_cache = image_cache
    app.state.image_loader = ImageLoader(transport, image_cache)

    app.include_router(recipes_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
