"""Sitemap endpoint: serves ``generate_xml`` output at a single fixed path."""

import logging
from typing import Any, Callable, Iterable

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from seo_tools.errors import ConfigurationError, ValidationError
from seo_tools.services.sitemap import generate_xml

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

SitemapUrlsProvider = Callable[[], Iterable[Any]]

_OTHER_METHODS = ["POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_sitemap_router(
    get_sitemap_urls: SitemapUrlsProvider,
    prefix: str = "/sitemap.xml",
) -> APIRouter:
    """Return a router serving the sitemap for *get_sitemap_urls* at *prefix*.

    ``GET {prefix}`` answers ``200 application/xml``.  Every other method on
    *prefix*, and every sub-path below it, answers ``404 Not found``; the path
    is matched exactly.

    *get_sitemap_urls* is called on every request and must return
    :class:`~seo_tools.models.sitemap.SitemapUrlEntry` objects or mappings.

    Raises:
        ConfigurationError: if *get_sitemap_urls* is not callable or *prefix*
            does not start with ``/``.
    """
    if not callable(get_sitemap_urls):
        raise ConfigurationError(f"Sitemap provider {get_sitemap_urls!r} is not callable")
    if not prefix.startswith("/") or prefix.endswith("/"):
        raise ConfigurationError(f"Sitemap prefix must start and not end with '/': {prefix!r}")

    router = APIRouter()

    @router.get(prefix, summary="XML sitemap", response_class=Response)
    @limiter.limit("30/minute")
    async def sitemap(request: Request) -> Response:
        try:
            xml = generate_xml(get_sitemap_urls())
        except ValidationError as exc:
            logger.error("Invalid sitemap entry from %r: %s", get_sitemap_urls, exc)
            raise HTTPException(status_code=500, detail="Sitemap could not be generated.")

        logger.info("Serving sitemap", extra={"path": request.url.path, "bytes": len(xml)})
        return Response(content=xml, media_type="application/xml")

    @router.api_route(prefix, methods=_OTHER_METHODS, include_in_schema=False)
    @router.api_route(
        prefix + "/{rest:path}", methods=["GET"] + _OTHER_METHODS, include_in_schema=False
    )
    async def not_found() -> PlainTextResponse:
        return PlainTextResponse("Not found", status_code=404)

    return router
