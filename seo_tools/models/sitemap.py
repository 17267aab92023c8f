from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from seo_tools.models.page import DateLike


class SitemapUrlEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    loc: str
    lastmod: Optional[DateLike] = None
    changefreq: Optional[str] = Field(
        default=None,
        description="How often the page changes (always, hourly, daily, weekly, monthly, yearly, never).",
        examples=["daily", "monthly"],
    )
    priority: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Priority relative to other URLs on the site (0.0–1.0).",
    )
