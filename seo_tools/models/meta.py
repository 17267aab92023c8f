from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from seo_tools.models.page import Breadcrumb


class MetaTag(BaseModel):
    """A ``<meta>`` tag; ``name`` holds either the name or the ``og:`` property."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: Optional[str] = None


class PageLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    rel: str
    href: Optional[str] = None


class MetaBundle(BaseModel):
    """Everything a document-head template needs to render one page."""

    model_config = ConfigDict(frozen=True)

    page_title: str
    breadcrumbs: List[Breadcrumb]
    links: List[PageLink]
    meta_tags: List[MetaTag]
    schemas: List[Dict[str, Any]]
