"""Single entry point for turning catalog text into safe markup."""

from __future__ import annotations

from typing import Optional

from catalogtext.core.models import DEFAULT_FALLBACK_TEXT
from catalogtext.richtext.detector import looks_like_markdown
from catalogtext.richtext.markdown import markdown_to_html
from catalogtext.richtext.sanitize import sanitize_html
from catalogtext.utils.text import paragraphs_to_html, synthesize_description


def render(raw: Optional[str], fallback: str = DEFAULT_FALLBACK_TEXT) -> str:
    """Render untrusted description text to allowlisted HTML.

    Markdown-looking input is converted first; everything else is treated
    as markup. The result is always sanitized and never empty.
    """
    text = raw or ""
    if looks_like_markdown(text):
        text = markdown_to_html(text)
    return sanitize_html(text, fallback=fallback)


def describe_html(raw: Optional[str], fallback: str = DEFAULT_FALLBACK_TEXT) -> str:
    """Condense a long catalog body into a few sanitized paragraphs."""
    return sanitize_html(paragraphs_to_html(synthesize_description(raw)), fallback=fallback)
