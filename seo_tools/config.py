"""Environment-driven construction of :class:`SiteConfig`."""

import logging
import os
from typing import Mapping, Optional

from seo_tools.errors import ConfigurationError
from seo_tools.models.site_config import DEFAULT_LOCALE, SiteConfig

logger = logging.getLogger(__name__)

_ENV_PREFIX = "SEO_"
_REQUIRED = ("SITE_NAME", "SITE_URL")


def _split_links(raw: str) -> tuple:
    return tuple(link.strip() for link in raw.split(",") if link.strip())


def load_site_config(environ: Optional[Mapping[str, str]] = None) -> SiteConfig:
    """Build a :class:`SiteConfig` from ``SEO_*`` environment variables.

    ``SEO_SITE_NAME`` and ``SEO_SITE_URL`` are required.  Social links are
    read from ``SEO_SITE_SOCIAL_LINKS`` as a comma-separated list.

    Raises:
        ConfigurationError: when a required variable is missing or empty.
    """
    env = os.environ if environ is None else environ

    for key in _REQUIRED:
        if not env.get(_ENV_PREFIX + key):
            raise ConfigurationError(f"Missing environment variable: {_ENV_PREFIX}{key}")

    config = SiteConfig(
        name=env["SEO_SITE_NAME"],
        url=env["SEO_SITE_URL"],
        logo_url=env.get("SEO_SITE_LOGO_URL") or None,
        description=env.get("SEO_SITE_DESCRIPTION") or None,
        social_media_links=_split_links(env.get("SEO_SITE_SOCIAL_LINKS", "")),
        author=env.get("SEO_SITE_AUTHOR") or None,
        locale=env.get("SEO_OG_LOCALE") or DEFAULT_LOCALE,
    )
    logger.info("Loaded site config for %s", config.url)
    return config
