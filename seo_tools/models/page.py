from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

DateLike = Union[datetime, date, str]


class Breadcrumb(BaseModel):
    """One navigational trail item, e.g. ``{"label": "Blog", "to": "/blog"}``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str
    to: str


class Article(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    published_at: Optional[DateLike] = None
    slug: str


class PageOptions(BaseModel):
    """Per-page input to :func:`~seo_tools.services.meta.build_meta`.

    ``description`` and ``image`` do not fall back to the site description or
    logo: when unset, the corresponding meta and Open Graph tags are omitted.
    Pass ``site.description`` / ``site.logo_url`` explicitly to emit them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = ""
    description: Optional[str] = None
    image: Optional[str] = None
    breadcrumbs: List[Breadcrumb] = []
    article: Optional[Article] = None
    extra_schemas: List[Union[Dict[str, Any], List[Dict[str, Any]]]] = []
    """JSON-LD objects appended verbatim after the built-in schemas.

    Nested lists are flattened into the resulting schema sequence.
    """
