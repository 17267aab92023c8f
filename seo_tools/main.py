import logging
import logging.config
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from seo_tools.config import load_site_config
from seo_tools.models.site_config import SiteConfig
from seo_tools.routers.sitemap import SitemapUrlsProvider, create_sitemap_router, limiter

logger = logging.getLogger(__name__)

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}


def configure_logging() -> None:
    logging.config.dictConfig(LOGGING_CONFIG)


def create_app(
    get_sitemap_urls: SitemapUrlsProvider,
    site_config: Optional[SiteConfig] = None,
    sitemap_path: str = "/sitemap.xml",
) -> FastAPI:
    """Build the FastAPI application serving the sitemap.

    *site_config* is loaded from ``SEO_*`` environment variables when not
    given and is exposed as ``app.state.site_config`` for
    :func:`seo_tools.routers.meta.attach_meta`.
    """
    configure_logging()

    if site_config is None:
        site_config = load_site_config()

    app = FastAPI(
        title=site_config.name,
        description="SEO metadata and XML sitemap for " + site_config.url,
        version="1.0.0",
    )

    app.state.site_config = site_config

    # Rate-limiting state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception for %s", request.url)
        return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})

    app.include_router(create_sitemap_router(get_sitemap_urls, prefix=sitemap_path))

    @app.get("/", summary="Health check")
    async def root() -> dict:
        return {"message": f"Hello from {site_config.name}"}

    logger.info("Application created for %s", site_config.url)
    return app
