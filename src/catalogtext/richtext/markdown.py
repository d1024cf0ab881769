"""Constrained markdown to HTML conversion for catalog descriptions.

Supports headings, unordered lists, paragraphs, bold, italic, inline code,
links and images. The output is intermediate markup and must still go
through ``sanitize_html`` before display.
"""

from __future__ import annotations

import html
import re

from catalogtext.core.models import Block, BlockKind

_HEADING_RE = re.compile(r"^(#+)\s+(.+)$")
_BULLET_RE = re.compile(r"^[-*]\s+(.*)$")

_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\((https?://[^)\s]+)\)", re.IGNORECASE)
_LINK_RE = re.compile(r"\[([^\]]+)\]\((https?://[^)\s]+)\)", re.IGNORECASE)
_STRONG_RE = re.compile(r"\*\*(.+?)\*\*")
_EM_RE = re.compile(r"\*([^*\n]+?)\*")
_CODE_RE = re.compile(r"`([^`\n]+)`")

# Generated tags are parked behind NUL-delimited tokens so the emphasis
# rules never rewrite text inside an attribute value.
_SLOT = "\x00{}\x00"
_SLOT_RE = re.compile(r"\x00(\d+)\x00")

MAX_HEADING_LEVEL = 6


def render_inline(text: str) -> str:
    """Escape text and apply the inline rules in their fixed order."""
    slots: list[str] = []

    def park(markup: str) -> str:
        slots.append(markup)
        return _SLOT.format(len(slots) - 1)

    def image(m: re.Match[str]) -> str:
        return park(f'<img src="{m.group(2)}" alt="{m.group(1)}">')

    def link(m: re.Match[str]) -> str:
        return park(f'<a href="{m.group(2)}">') + m.group(1) + park("</a>")

    out = html.escape(text.replace("\x00", ""), quote=True)
    out = _IMAGE_RE.sub(image, out)
    out = _LINK_RE.sub(link, out)
    out = _STRONG_RE.sub(r"<strong>\1</strong>", out)
    out = _EM_RE.sub(r"<em>\1</em>", out)
    out = _CODE_RE.sub(r"<code>\1</code>", out)
    return _SLOT_RE.sub(lambda m: slots[int(m.group(1))], out)


def parse_blocks(text: str) -> list[Block]:
    """Split markdown into heading, paragraph and list blocks."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    blocks: list[Block] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            blocks.append(Block(BlockKind.LIST, items=list(pending)))
            pending.clear()

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            flush()
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            flush()
            level = min(len(heading.group(1)), MAX_HEADING_LEVEL)
            blocks.append(Block(BlockKind.HEADING, render_inline(heading.group(2).strip()), level=level))
            continue

        bullet = _BULLET_RE.match(line)
        if bullet:
            pending.append(render_inline(bullet.group(1)))
            continue

        flush()
        blocks.append(Block(BlockKind.PARAGRAPH, render_inline(line)))

    flush()
    return blocks


def markdown_to_html(text: str) -> str:
    """Convert constrained markdown to (unsanitized) HTML."""
    return "\n".join(block.to_html() for block in parse_blocks(text or ""))
