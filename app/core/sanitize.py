"""
HTML sanitization for rich-text fields (notice bodies, CEO message, ...).

Two interchangeable strategies share one contract: script/style elements are
removed with their content, event-handler attributes and javascript: URLs are
dropped, and sanitize(sanitize(x)) == sanitize(x). The strategy is picked once
with configure_sanitizer(); call sites only use sanitize().
"""

import logging
import re
from typing import Dict, Optional, Set

from bleach.sanitizer import Cleaner
import nh3

logger = logging.getLogger(__name__)

ALLOWED_TAGS: Set[str] = {
    "a", "b", "blockquote", "br", "code", "em", "figure", "figcaption", "h1", "h2",
    "h3", "h4", "h5", "h6", "hr", "i", "img", "li", "mark", "ol", "p", "pre", "s",
    "span", "strong", "sub", "sup", "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
}

ALLOWED_ATTRIBUTES: Dict[str, Set[str]] = {
    "*": {"class"},
    "a": {"href", "title", "target"},
    "img": {"src", "alt", "title", "width", "height"},
    "td": {"colspan", "rowspan"},
    "th": {"colspan", "rowspan"},
}

ALLOWED_URL_SCHEMES: Set[str] = {"http", "https", "mailto", "tel"}

_SCRIPT_OR_STYLE = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)


class Nh3Sanitizer:
    name = "nh3"

    def clean(self, html: str) -> str:
        return nh3.clean(
            html,
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            url_schemes=ALLOWED_URL_SCHEMES,
            clean_content_tags={"script", "style"},
            strip_comments=True,
        )


class BleachSanitizer:
    name = "bleach"

    def __init__(self):
        self._cleaner = Cleaner(
            tags=ALLOWED_TAGS,
            attributes={tag: sorted(attrs) for tag, attrs in ALLOWED_ATTRIBUTES.items()},
            protocols=ALLOWED_URL_SCHEMES,
            strip=True,
            strip_comments=True,
        )

    def clean(self, html: str) -> str:
        # bleach keeps the text of stripped tags; script/style bodies must go entirely
        return self._cleaner.clean(_SCRIPT_OR_STYLE.sub("", html))


SANITIZERS = {
    Nh3Sanitizer.name: Nh3Sanitizer,
    BleachSanitizer.name: BleachSanitizer,
}

_active = None


def configure_sanitizer(backend: str):
    """Select the sanitizer strategy for this process."""
    global _active
    try:
        _active = SANITIZERS[backend.lower()]()
    except KeyError:
        raise ValueError(f"Unknown sanitizer backend: {backend}")
    logger.info("HTML sanitizer: %s", _active.name)
    return _active


def get_sanitizer():
    if _active is None:
        from app.config import settings
        return configure_sanitizer(settings.sanitizer_backend)
    return _active


def sanitize(html: Optional[str]) -> Optional[str]:
    if not html:
        return html
    return get_sanitizer().clean(html)
