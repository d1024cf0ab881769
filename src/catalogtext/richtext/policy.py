"""Allowlist policy for catalog rich text."""

from __future__ import annotations

from types import MappingProxyType

ALLOWED_ATTRIBUTES = MappingProxyType({
    "div": frozenset(),
    "p": frozenset(),
    "br": frozenset(),
    "h1": frozenset(),
    "h2": frozenset(),
    "h3": frozenset(),
    "h4": frozenset(),
    "h5": frozenset(),
    "h6": frozenset(),
    "a": frozenset({"href", "title", "target", "rel"}),
    "img": frozenset({"src", "alt", "title"}),
    "ul": frozenset(),
    "li": frozenset(),
    "strong": frozenset(),
    "em": frozenset(),
    "code": frozenset(),
})

ALLOWED_TAGS = frozenset(ALLOWED_ATTRIBUTES)

# Checked by bleach after the attribute filter; relative URLs carry no scheme and pass.
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

UNSAFE_SCHEMES = ("javascript:", "vbscript:", "data:")

URL_ATTRIBUTES = frozenset({"href", "src"})

FORBIDDEN_ATTRIBUTE = "style"
EVENT_HANDLER_PREFIX = "on"

ANCHOR_TARGET = "_blank"
ANCHOR_REL = "noopener noreferrer nofollow"


def is_unsafe_url(value: str) -> bool:
    """True if value starts with a script or embedded-data scheme."""
    return value.strip().lower().startswith(UNSAFE_SCHEMES)


def is_allowed_attribute(tag: str, name: str, value: str) -> bool:
    """Attribute filter applied to every attribute of an allowlisted tag."""
    name = name.lower()
    if name == FORBIDDEN_ATTRIBUTE or name.startswith(EVENT_HANDLER_PREFIX):
        return False
    if name not in ALLOWED_ATTRIBUTES.get(tag.lower(), ()):
        return False
    if name in URL_ATTRIBUTES and is_unsafe_url(value):
        return False
    return True
