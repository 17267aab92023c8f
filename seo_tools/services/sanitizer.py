import re
from typing import Optional

# Matches any tag-like span from "<" to the next ">", e.g. <p>, </strong>, <br/>.
# Not an HTML parser: a ">" inside an attribute value ends the match early.
_TAG_RE = re.compile(r"<[^>]*>")


def strip_html_tags(text: Optional[str]) -> Optional[str]:
    """Remove every ``<...>`` span from *text*; ``None`` passes through.

    Entities are left untouched and no whitespace is collapsed, so
    ``"<p>We need <strong>a developer</strong></p>"`` becomes
    ``"We need a developer"``.
    """
    if text is None:
        return None
    return _TAG_RE.sub("", text)
