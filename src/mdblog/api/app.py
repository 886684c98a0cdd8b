"""FastAPI application exposing the profile and articles as JSON"""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from mdblog.config import Settings
from mdblog.core.models import ArticleDetail, ArticleSummary, Profile
from mdblog.core.profile import ASSET_URL_PREFIX
from mdblog.core.store import BlogDataStore
from mdblog.errors import DataLoadError


logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the API for the data root named in settings; fails fast on a blank data path."""
    store = BlogDataStore(settings.data_path, settings.base_url)

    app = FastAPI(title=settings.app_name, docs_url=None, redoc_url=None)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(DataLoadError)
    async def data_load_error_handler(request: Request, exc: DataLoadError):
        logger.error("Failed to serve %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.get("/api/profile", response_model=Profile)
    def get_profile():
        return store.get_profile()

    @app.get("/api/articles", response_model=list[ArticleSummary])
    def list_articles():
        return store.list_article_summaries()

    @app.get("/api/articles/{article_id}", response_model=ArticleDetail)
    def get_article(article_id: str):
        article = store.get_article_detail(article_id)
        if article is None:
            raise HTTPException(status_code=404, detail=f"Article not found: {article_id}")
        return article

    if store.assets_dir.is_dir():
        app.mount(ASSET_URL_PREFIX.rstrip("/"), StaticFiles(directory=store.assets_dir), name="assets")
    else:
        logger.warning("Assets directory %s not found; %s is not served", store.assets_dir, ASSET_URL_PREFIX)

    logger.info("Serving blog data from %s", store.data_root)
    return app
