from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse

from user_search.config import Settings, get_settings
from user_search.dataset import DatasetStore
from user_search.search import SearchService, SearchServiceConfig

from .routers.search import router as search_router


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the user search API for ``settings`` (read from the environment by default).

    The dataset is loaded in the lifespan, so import and construction stay cheap.
    /openapi.json and /docs are served by plain routes returning application/json
    and HTML: the built-in schema route answers with a vendor media type that
    strict Accept headers reject with 406.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Load the dataset once; a missing or broken file aborts startup.
        store = DatasetStore.from_file(settings.dataset_path)
        if not settings.access_tokens:
            logger.warning("No access tokens configured; every search will be rejected")
        app.state.search_service = SearchService.from_store(
            store, SearchServiceConfig.from_settings(settings)
        )
        yield

    app = FastAPI(
        title="User Search API",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        root_path=settings.base_path,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(search_router)

    @app.get("/health", tags=["ops"], summary="Health check")
    async def health():
        return {"status": "ok"}

    @app.get("/openapi.json", include_in_schema=False)
    def openapi_json():
        schema = app.openapi()
        if settings.base_path and settings.base_path != "/":
            # advertise the subpath to "Try it out"; the cached schema is left untouched
            schema = {**schema, "servers": [{"url": settings.base_path}]}
        return JSONResponse(schema)

    # relative, so it resolves under the base path
    @app.get("/docs", include_in_schema=False)
    def swagger_ui():
        return get_swagger_ui_html(openapi_url="openapi.json", title="User Search API Docs")

    return app
