"""XSS sanitization for catalog rich text."""

from __future__ import annotations

import html
import logging
from typing import Optional

from bleach import html5lib_shim
from bleach.sanitizer import Cleaner
from bs4 import BeautifulSoup

from catalogtext.core.models import DEFAULT_FALLBACK_TEXT
from catalogtext.richtext.policy import (
    ALLOWED_PROTOCOLS,
    ALLOWED_TAGS,
    ANCHOR_REL,
    ANCHOR_TARGET,
    is_allowed_attribute,
)

logger = logging.getLogger(__name__)

_HARDENED = {"target", "rel"}


class AnchorHardeningFilter(html5lib_shim.Filter):
    """Force target/rel on every anchor that survived sanitization."""

    def __iter__(self):
        for token in super().__iter__():
            if token["type"] in ("StartTag", "EmptyTag") and token["name"] == "a":
                attrs = {key: value for key, value in token["data"].items() if key[1] not in _HARDENED}
                attrs[(None, "target")] = ANCHOR_TARGET
                attrs[(None, "rel")] = ANCHOR_REL
                token["data"] = attrs
            yield token


def fallback_markup(text: str = DEFAULT_FALLBACK_TEXT) -> str:
    """Escape text and wrap it in a single paragraph."""
    return f"<p>{html.escape(text, quote=True)}</p>"


def _is_disallowed(tag) -> bool:
    return tag.name not in ALLOWED_TAGS


def defang(raw_html: str) -> str:
    """Replace every element outside the allowlist with its text content.

    The outermost disallowed element goes first, so allowed tags nested in
    it become plain text too.
    """
    soup = BeautifulSoup(raw_html, "html.parser")
    tag = soup.find(_is_disallowed)
    while tag is not None:
        tag.replace_with(tag.get_text())
        tag = soup.find(_is_disallowed)
    return soup.decode(formatter="minimal")


def _build_cleaner() -> Cleaner:
    # Cleaner instances are not thread-safe, so each call gets its own.
    return Cleaner(
        tags=ALLOWED_TAGS,
        attributes=is_allowed_attribute,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[AnchorHardeningFilter],
    )


def sanitize_html(raw_html: Optional[str], fallback: str = DEFAULT_FALLBACK_TEXT) -> str:
    """Sanitize markup down to the catalog allowlist. Never raises.

    Disallowed elements are defanged to text, then bleach filters the
    attributes and URLs of what is left. Blank input, or input that
    sanitizes to nothing, yields the fallback paragraph. If parsing fails
    the raw text is escaped instead.
    """
    text = (raw_html or "").strip()
    if not text:
        return fallback_markup(fallback)

    try:
        cleaned = _build_cleaner().clean(defang(text)).strip()
    except Exception:
        logger.warning("Markup parsing failed; rendering as escaped text", exc_info=True)
        return fallback_markup(text)

    return cleaned or fallback_markup(fallback)
