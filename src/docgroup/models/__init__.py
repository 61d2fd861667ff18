"""Entity model consumed and annotated by the grouping pass."""

from .comments import Comment, CommentDisplayPart, CommentTag
from .groups import Category, Group
from .kinds import EntityKind, KindLike, ReflectionVariant, kind_key, parse_kind
from .reflections import (
    Container,
    Declaration,
    Entity,
    Parameter,
    Project,
    ReflectionFlags,
    Signature,
    SourceReference,
    TypeParameter,
    walk,
)

__all__ = [
    "Category",
    "Comment",
    "CommentDisplayPart",
    "CommentTag",
    "Container",
    "Declaration",
    "Entity",
    "EntityKind",
    "Group",
    "KindLike",
    "Parameter",
    "Project",
    "ReflectionFlags",
    "ReflectionVariant",
    "Signature",
    "SourceReference",
    "TypeParameter",
    "kind_key",
    "parse_kind",
    "walk",
]
