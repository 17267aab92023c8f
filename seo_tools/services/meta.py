"""Page metadata assembly: meta tags, Open Graph, canonical link and JSON-LD.

:func:`build_meta` is a pure function of the site configuration, the page
options and the current request path.  It touches no request or response
object; attaching the resulting :class:`~seo_tools.models.meta.MetaBundle` to
whatever the host framework uses is left to the caller (see
:func:`seo_tools.routers.meta.attach_meta` for FastAPI).

Output order
------------
``meta_tags``
    ``title``, ``description``, ``image``, then ``og:title``, ``og:type``,
    ``og:locale``, ``og:description``, ``og:url``, ``og:image``.  Tags whose
    content is ``None`` or empty are dropped.

``schemas``
    ``WebSite``, ``Organization``, ``BreadcrumbList`` (only with
    breadcrumbs), ``Article`` (only with an article), then any
    ``extra_schemas`` in caller order.
"""

import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from seo_tools.models.meta import MetaBundle, MetaTag, PageLink
from seo_tools.models.page import PageOptions
from seo_tools.models.site_config import SiteConfig
from seo_tools.services.normalizer import resolve_path, truncate
from seo_tools.services.options import parse_options
from seo_tools.services.sanitizer import strip_html_tags
from seo_tools.services.schema import (
    article_schema,
    breadcrumb_schema,
    organization_schema,
    website_schema,
)

logger = logging.getLogger(__name__)

OG_TYPE = "website"


def build_page_title(title: Optional[str], site: SiteConfig) -> str:
    """Return ``"{title} - {site name}"``, or just the site name for an empty title."""
    if not title:
        return site.name
    return f"{title} - {site.name}"


def _description(raw: Optional[str]) -> Optional[str]:
    return truncate(strip_html_tags(raw))


def _present_tags(tags: Iterable[MetaTag]) -> List[MetaTag]:
    return [tag for tag in tags if tag.content]


def _page_tags(title: str, description: Optional[str], image: Optional[str]) -> List[MetaTag]:
    return _present_tags(
        [
            MetaTag(name="title", content=title),
            MetaTag(name="description", content=description),
            MetaTag(name="image", content=image),
        ]
    )


def _open_graph_tags(
    title: str,
    description: Optional[str],
    image: Optional[str],
    url: str,
    locale: str,
) -> List[MetaTag]:
    return _present_tags(
        [
            MetaTag(name="og:title", content=title),
            MetaTag(name="og:type", content=OG_TYPE),
            MetaTag(name="og:locale", content=locale),
            MetaTag(name="og:description", content=description),
            MetaTag(name="og:url", content=url),
            MetaTag(name="og:image", content=image),
        ]
    )


def _page_links(canonical_url: str) -> List[PageLink]:
    links = [PageLink(rel="canonical", href=canonical_url)]
    return [link for link in links if link.href]


def _flatten(schemas: Iterable[Any]) -> List[Dict[str, Any]]:
    flat: List[Dict[str, Any]] = []
    for schema in schemas:
        if isinstance(schema, list):
            flat.extend(_flatten(schema))
        else:
            flat.append(copy.deepcopy(schema))
    return flat


def build_meta(
    site: SiteConfig,
    options: Union[PageOptions, Mapping[str, Any], None] = None,
    current_path: Optional[str] = None,
) -> MetaBundle:
    """Build the complete metadata bundle for one page.

    Args:
        site:          Process-wide site configuration.
        options:       :class:`PageOptions` or an equivalent mapping.
        current_path:  Path (or URL) of the page being rendered.  Only its
                       path component is resolved against ``site.url``; when
                       ``None`` the canonical link and ``og:url`` are omitted.

    Raises:
        ConfigurationError: when *options* contains unknown keys or values of
            the wrong type.
    """
    opts = parse_options(PageOptions, options, "build_meta")

    title = build_page_title(opts.title, site)
    description = _description(opts.description)
    canonical_url = resolve_path(site.url, current_path)

    meta_tags = _page_tags(title, description, opts.image) + _open_graph_tags(
        title, description, opts.image, canonical_url, site.locale
    )

    schemas: List[Any] = [website_schema(site), organization_schema(site)]
    if opts.breadcrumbs:
        schemas.append(breadcrumb_schema(opts.breadcrumbs, site))
    if opts.article is not None:
        schemas.append(article_schema(opts.article, site))
    schemas.extend(opts.extra_schemas)
    schemas = _flatten(schemas)

    logger.debug(
        "Built metadata for %s: %d meta tags, %d schemas",
        canonical_url or "<unknown path>",
        len(meta_tags),
        len(schemas),
    )

    return MetaBundle(
        page_title=title,
        breadcrumbs=list(opts.breadcrumbs),
        links=_page_links(canonical_url),
        meta_tags=meta_tags,
        schemas=schemas,
    )
