"""Site-level JSON-LD builders: WebSite, Organization, BreadcrumbList, Article."""

from typing import Any, Dict, List

from seo_tools.models.page import Article, Breadcrumb
from seo_tools.models.site_config import SiteConfig
from seo_tools.services.normalizer import format_iso8601, resolve_url

# WebSite/Organization carry the trailing slash, the others do not
_CONTEXT_SITE = "https://schema.org/"
_CONTEXT = "https://schema.org"


def website_schema(site: SiteConfig) -> Dict[str, Any]:
    return {
        "@context": _CONTEXT_SITE,
        "@type": "WebSite",
        "name": site.name,
        "url": site.url,
    }


def organization_schema(site: SiteConfig) -> Dict[str, Any]:
    return {
        "@context": _CONTEXT_SITE,
        "@type": "Organization",
        "name": site.name,
        "url": site.url,
        "logo": site.logo_url,
        "description": site.description,
        "sameAs": list(site.social_media_links),
    }


def breadcrumb_schema(breadcrumbs: List[Breadcrumb], site: SiteConfig) -> Dict[str, Any]:
    """Build a ``BreadcrumbList`` with 1-indexed positions in input order."""
    return {
        "@context": _CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": crumb.label,
                "item": resolve_url(site.url, crumb.to),
            }
            for position, crumb in enumerate(breadcrumbs, start=1)
        ],
    }


def article_schema(article: Article, site: SiteConfig) -> Dict[str, Any]:
    return {
        "@context": _CONTEXT,
        "@type": "Article",
        "headline": article.title,
        "description": article.description,
        "image": article.image,
        "datePublished": format_iso8601(article.published_at),
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": f"{site.url}/{article.slug}",
        },
        "author": {
            "@type": "Person",
            "name": site.author,
        },
        "publisher": {
            "@type": "Organization",
            "name": site.name,
            "logo": {
                "@type": "ImageObject",
                "url": site.logo_url,
            },
        },
    }
