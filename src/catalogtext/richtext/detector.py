"""Markdown-vs-markup sniffing for catalog text.

This is approximate tag sniffing, not a grammar. A miss only means the text
is sanitized as markup without markdown formatting, which is still safe.
"""

from __future__ import annotations

import re
from typing import Optional

STRUCTURAL_TAGS = ("div", "img", "h1", "h2", "h3", "h4", "h5", "h6", "p", "a", "ul", "ol", "li", "br")

_HTML_TAG_RE = re.compile(
    r"</?(?:" + "|".join(STRUCTURAL_TAGS) + r")(?=[\s/>])",
    re.IGNORECASE,
)
_HEADING_RE = re.compile(r"^[ \t]*#+[ \t]+\S", re.MULTILINE)
_LINK_RE = re.compile(r"!?\[[^\]\n]*\]\([^)\n]*\)")


def looks_like_html(text: Optional[str]) -> bool:
    """True if the text already contains a known structural tag."""
    if not text:
        return False
    return bool(_HTML_TAG_RE.search(text))


def looks_like_markdown(text: Optional[str]) -> bool:
    """True if the text has markdown headings or links and no structural tags.

    HTML evidence wins: treating real markup as markdown would mangle it.
    """
    if not text or not text.strip():
        return False
    if looks_like_html(text):
        return False
    return bool(_HEADING_RE.search(text) or _LINK_RE.search(text))
