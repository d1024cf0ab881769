"""Plain-text helpers for catalog descriptions."""

from __future__ import annotations

import re
from html import unescape
from typing import Optional

NO_DETAILS_TEXT = "No detailed description available."

_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_CHANGELOG_RE = re.compile(r"changelog|bugs?|fix|error", re.IGNORECASE)

MIN_SENTENCE_LENGTH = 30
MAX_SENTENCES = 8


def to_plain_text(value: Optional[str]) -> str:
    """Flatten markup to a single line of text."""
    text = re.sub(r"<\s*br\s*/?\s*>", "\n", value or "", flags=re.IGNORECASE)
    text = re.sub(r"</p>", "\n\n", text, flags=re.IGNORECASE)
    text = re.sub(r"<[^>]*>", " ", text)
    return re.sub(r"\s+", " ", unescape(text)).strip()


def truncate(text: str, max_length: int = 300, suffix: str = "...") -> str:
    """Truncate text to max_length, breaking at word boundary."""
    if len(text) <= max_length:
        return text
    truncated = text[: max_length - len(suffix)]
    # Break at last space
    last_space = truncated.rfind(" ")
    if last_space > max_length // 2:
        truncated = truncated[:last_space]
    return truncated + suffix


def synthesize_description(raw: Optional[str]) -> str:
    """Pick the descriptive sentences out of a catalog body.

    Sentences that read like changelog entries are skipped when anything
    else is available; the rest are paired into short paragraphs.
    """
    cleaned = to_plain_text(raw)
    if not cleaned:
        return NO_DETAILS_TEXT

    sentences = [s.strip() for s in _SENTENCE_SPLIT_RE.split(cleaned)]
    sentences = [s for s in sentences if len(s) > MIN_SENTENCE_LENGTH]
    prioritized = [s for s in sentences if not _CHANGELOG_RE.search(s)]
    selected = (prioritized or sentences)[:MAX_SENTENCES]

    chunks = [" ".join(selected[i:i + 2]) for i in range(0, len(selected), 2)]
    return "\n\n".join(chunks) or NO_DETAILS_TEXT


def paragraphs_to_html(value: Optional[str]) -> str:
    """Wrap blank-line separated chunks in <p> tags.

    The result is not escaped; pass it through the sanitizer before display.
    """
    if not value or not value.strip():
        return f"<p>{NO_DETAILS_TEXT}</p>"
    paragraphs = [p.strip() for p in re.split(r"\n{2,}", value) if p.strip()]
    return "".join(f"<p>{p}</p>" for p in paragraphs)
