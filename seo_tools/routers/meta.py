"""FastAPI glue for attaching a metadata bundle to the current request."""

from typing import Any, Mapping, Optional, Union

from fastapi import Request

from seo_tools.models.meta import MetaBundle
from seo_tools.models.page import PageOptions
from seo_tools.models.site_config import SiteConfig
from seo_tools.services.meta import build_meta


def attach_meta(
    request: Request,
    options: Union[PageOptions, Mapping[str, Any], None] = None,
    site: Optional[SiteConfig] = None,
) -> MetaBundle:
    """Build metadata for *request* and store it on ``request.state.meta``.

    The canonical URL is derived from ``request.url.path``.  When *site* is
    omitted, ``request.app.state.site_config`` is used.
    """
    if site is None:
        site = request.app.state.site_config
    bundle = build_meta(site, options, current_path=request.url.path)
    request.state.meta = bundle
    return bundle
