"""Config and markdown block models for the catalogtext renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field


DEFAULT_FALLBACK_TEXT = "No description available."


class AppConfig(BaseModel):
    fallback_text: str = DEFAULT_FALLBACK_TEXT
    excerpt_length: int = Field(default=300, ge=20)
    log_level: str = "WARNING"


# --- Markdown blocks ---

class BlockKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"


@dataclass
class Block:
    """One parsed unit of markdown; text is already inline-processed."""

    kind: BlockKind
    text: str = ""
    level: int = 0
    items: list[str] = field(default_factory=list)

    def to_html(self) -> str:
        if self.kind is BlockKind.HEADING:
            return f"<h{self.level}>{self.text}</h{self.level}>"
        if self.kind is BlockKind.LIST:
            inner = "".join(f"<li>{item}</li>" for item in self.items)
            return f"<ul>{inner}</ul>"
        return f"<p>{self.text}</p>"
