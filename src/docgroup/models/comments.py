"""Structured documentation comments as produced by the comment parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CommentDisplayPart:
    """One renderable chunk of comment text ('text', 'code', 'inline-tag')."""

    kind: str
    text: str


@dataclass
class CommentTag:
    """A block tag such as '@group' or '@since' with its content."""

    tag: str
    content: List[CommentDisplayPart] = field(default_factory=list)

    def text(self) -> str:
        return Comment.combine_display_parts(self.content)


@dataclass
class Comment:
    """A parsed doc comment: summary text, block tags and modifier tags."""

    summary: List[CommentDisplayPart] = field(default_factory=list)
    block_tags: List[CommentTag] = field(default_factory=list)
    modifier_tags: List[str] = field(default_factory=list)

    @staticmethod
    def combine_display_parts(parts: Optional[List[CommentDisplayPart]]) -> str:
        """Concatenate the text of display parts."""
        if not parts:
            return ""
        return "".join(part.text for part in parts)

    def get_tag(self, name: str) -> Optional[CommentTag]:
        """First block tag with the given name, if any."""
        return next((t for t in self.block_tags if t.tag == name), None)

    def has_modifier(self, name: str) -> bool:
        return name in self.modifier_tags
