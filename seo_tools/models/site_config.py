from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

DEFAULT_LOCALE = "sv_SE"


class SiteConfig(BaseModel):
    """Static, process-wide site metadata shared by every page."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    url: str  # absolute base URL, e.g. "https://example.com"
    logo_url: Optional[str] = None
    description: Optional[str] = None
    social_media_links: Tuple[str, ...] = ()
    author: Optional[str] = None
    locale: str = DEFAULT_LOCALE
    """Open Graph locale emitted as ``og:locale``."""
