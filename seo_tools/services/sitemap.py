"""Sitemap XML generation."""

import logging
from typing import Any, Iterable, List, Mapping, Union

import pydantic

from seo_tools.errors import ValidationError
from seo_tools.models.sitemap import SitemapUrlEntry
from seo_tools.services.normalizer import format_iso8601

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Order matters: "&" first so the entities produced below are not re-escaped
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

SitemapEntryInput = Union[SitemapUrlEntry, Mapping[str, Any]]


def escape_xml(value: Any) -> str:
    """Escape the five XML special characters in ``str(value)``."""
    text = str(value)
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def format_priority(priority: float) -> str:
    """Render *priority* with at least one decimal digit (``1`` → ``"1.0"``)."""
    return repr(float(priority))


def _coerce_entry(entry: SitemapEntryInput, index: int) -> SitemapUrlEntry:
    if isinstance(entry, SitemapUrlEntry):
        return entry
    if not isinstance(entry, Mapping) or entry.get("loc") is None:
        raise ValidationError(f"loc is required for sitemap entries (entry {index})")
    try:
        return SitemapUrlEntry.model_validate(entry)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid sitemap entry {index}: {exc}") from exc


def url_to_xml(entry: SitemapUrlEntry) -> str:
    """Render one ``<url>`` element; absent optional fields are omitted."""
    parts = ["  <url>", f"    <loc>{escape_xml(entry.loc)}</loc>"]

    lastmod = format_iso8601(entry.lastmod)
    if lastmod is not None:
        parts.append(f"    <lastmod>{lastmod}</lastmod>")
    if entry.changefreq is not None:
        parts.append(f"    <changefreq>{entry.changefreq}</changefreq>")
    if entry.priority is not None:
        parts.append(f"    <priority>{format_priority(entry.priority)}</priority>")

    parts.append("  </url>")
    return "\n".join(parts)


def generate_xml(urls: Iterable[SitemapEntryInput]) -> str:
    """Render *urls* as a complete sitemap XML document.

    Entries are written in input order, without sorting or deduplication.
    Every entry is validated before any output is produced.

    Raises:
        ValidationError: when an entry has no ``loc`` or is otherwise invalid.
    """
    entries: List[SitemapUrlEntry] = [
        _coerce_entry(entry, index) for index, entry in enumerate(urls)
    ]
    body = "\n".join(url_to_xml(entry) for entry in entries)

    logger.debug("Generated sitemap with %d URLs", len(entries))

    return f'{_XML_DECLARATION}\n<urlset xmlns="{SITEMAP_NS}">\n{body}\n</urlset>\n'
