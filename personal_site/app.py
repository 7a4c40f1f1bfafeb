"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from personal_site.cms_client import CMSClients, build_clients
from personal_site.config import STATIC_DIR, SiteConfig
from personal_site.routers import admin, debug, pages, preview
from personal_site.services.blog import BlogService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    clients = app.state.clients
    logger.info(
        "Site starting (contentful environment=%s, delivery=%s, preview=%s)",
        app.state.config.environment,
        "on" if clients.delivery is not None else "off",
        "on" if clients.preview is not None else "off",
    )
    yield


def create_app(config: SiteConfig | None = None, clients: CMSClients | None = None) -> FastAPI:
    config = config or SiteConfig.from_env()
    if clients is None:
        clients = build_clients(config)

    app = FastAPI(
        title="Matt Cammish",
        description="Personal blog and portfolio backed by Contentful.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.clients = clients
    app.state.blog = BlogService(clients, config)

    # Static files
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    for r in [pages, admin]:
        app.include_router(r.router, include_in_schema=False)

    for r in [debug, preview]:
        app.include_router(r.router)

    return app
