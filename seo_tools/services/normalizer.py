"""Data normalisation utilities: truncation, URL resolution, ISO-8601 dates."""

from datetime import date, datetime, timedelta
from typing import Optional, Union
from urllib.parse import urljoin, urlparse

DEFAULT_MAX_LENGTH = 40
DEFAULT_TRAIL = ".."


def truncate(
    text: Optional[str],
    max_length: int = DEFAULT_MAX_LENGTH,
    trail: str = DEFAULT_TRAIL,
) -> Optional[str]:
    """Cut *text* to *max_length* characters and append *trail* when it was longer.

    Strings at or under the limit are returned unchanged; ``None`` passes
    through.

    Length is counted in code points, not grapheme clusters: a base letter
    followed by a combining mark counts as two, and the cut may separate
    them.
    """
    if text is None:
        return None
    if len(text) > max_length:
        return f"{text[:max_length]}{trail}"
    return text


def resolve_url(base_url: str, reference: str) -> str:
    """Resolve *reference* against *base_url* (RFC 3986 §5.3 merge)."""
    return urljoin(base_url, reference)


def resolve_path(base_url: str, current: Optional[str]) -> str:
    """Return the canonical URL for the request path *current*.

    Only the path component of *current* is used, so query strings and a
    foreign host never leak into the canonical URL.  Returns ``""`` when no
    current path is known.
    """
    if current is None:
        return ""
    return resolve_url(base_url, urlparse(current).path)


def format_iso8601(value: Union[datetime, date, str, None]) -> Optional[str]:
    """Render a date or datetime as ISO-8601 text.

    * ``date`` → ``YYYY-MM-DD``
    * UTC ``datetime`` → ``YYYY-MM-DDTHH:MM:SSZ``
    * other aware ``datetime`` → offset form, e.g. ``+02:00``
    * naive ``datetime`` → no offset
    * ``str`` → returned verbatim (assumed to be pre-formatted)
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, datetime):
        if value.utcoffset() == timedelta(0):
            return value.replace(tzinfo=None).isoformat() + "Z"
        return value.isoformat()
    return value.isoformat()
