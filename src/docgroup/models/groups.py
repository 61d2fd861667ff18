"""Groups and categories of documented entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .reflections import Entity


@dataclass(eq=False)
class Category:
    """A named subset of a group's members (from '@category' tags)."""

    title: str
    children: List["Entity"] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "children": [child.name for child in self.children],
        }


@dataclass(eq=False)
class Group:
    """A named, ordered bucket of references to a container's children.

    Members are shared with the container, not owned. The aggregate flags are
    filled in once, right after the group is populated.
    """

    title: str
    children: List["Entity"] = field(default_factory=list)
    categories: Optional[List[Category]] = None

    all_children_are_inherited: bool = False
    all_children_are_private: bool = False
    all_children_are_protected_or_private: bool = False
    all_children_are_external: bool = False

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        data = {
            "title": self.title,
            "children": [child.name for child in self.children],
            "all_children_are_inherited": self.all_children_are_inherited,
            "all_children_are_private": self.all_children_are_private,
            "all_children_are_protected_or_private": self.all_children_are_protected_or_private,
            "all_children_are_external": self.all_children_are_external,
        }
        if self.categories is not None:
            data["categories"] = [c.to_dict() for c in self.categories]
        return data
