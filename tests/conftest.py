"""Shared fixtures and helpers for catalogtext tests."""

from __future__ import annotations

from html.parser import HTMLParser

import pytest


class TagCollector(HTMLParser):
    """Collect (tag, attrs) pairs for every start tag in a fragment."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.tags: list[tuple[str, dict[str, str]]] = []

    def handle_starttag(self, tag, attrs):
        self.tags.append((tag, {name: value or "" for name, value in attrs}))

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)


def collect_tags(markup: str) -> list[tuple[str, dict[str, str]]]:
    collector = TagCollector()
    collector.feed(markup)
    collector.close()
    return collector.tags


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("CATALOGTEXT_FALLBACK_TEXT", "CATALOGTEXT_EXCERPT_LENGTH", "CATALOGTEXT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
