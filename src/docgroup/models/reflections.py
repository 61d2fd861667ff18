"""Documented entity model: declarations, signatures, parameters and the project root."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, List, Optional

from .comments import Comment
from .groups import Group
from .kinds import EntityKind, KindLike, ReflectionVariant


@dataclass
class ReflectionFlags:
    """Independently settable visibility and modifier flags."""

    is_private: bool = False
    is_protected: bool = False
    is_external: bool = False
    is_static: bool = False
    is_optional: bool = False


@dataclass
class SourceReference:
    """Where an entity is defined (file name is project-relative posix)."""

    file_name: str
    line: int = 0
    character: int = 0


@dataclass(eq=False)
class Entity:
    """Base for every documented element."""

    variant: ClassVar[ReflectionVariant]

    name: str
    kind: KindLike
    flags: ReflectionFlags = field(default_factory=ReflectionFlags)
    comment: Optional[Comment] = None
    sources: List[SourceReference] = field(default_factory=list)

    # Assigned during resolution (singular kind label)
    kind_string: Optional[str] = None

    def owned(self) -> Iterator["Entity"]:
        """Entities directly owned by this one, in traversal order."""
        return iter(())


@dataclass(eq=False)
class Parameter(Entity):
    variant: ClassVar[ReflectionVariant] = ReflectionVariant.PARAMETER

    kind: KindLike = EntityKind.PARAMETER


@dataclass(eq=False)
class TypeParameter(Entity):
    variant: ClassVar[ReflectionVariant] = ReflectionVariant.TYPE_PARAMETER

    kind: KindLike = EntityKind.TYPE_PARAMETER


@dataclass(eq=False)
class Signature(Entity):
    """A call, constructor, index or accessor signature."""

    variant: ClassVar[ReflectionVariant] = ReflectionVariant.SIGNATURE

    kind: KindLike = EntityKind.CALL_SIGNATURE
    parameters: List[Parameter] = field(default_factory=list)
    type_parameters: List[TypeParameter] = field(default_factory=list)

    def owned(self) -> Iterator[Entity]:
        yield from self.type_parameters
        yield from self.parameters


@dataclass(eq=False)
class Container(Entity):
    """An entity owning an ordered list of children and, once grouped, their groups."""

    children: List["Declaration"] = field(default_factory=list)
    groups: Optional[List[Group]] = None

    def owned(self) -> Iterator[Entity]:
        yield from self.children


@dataclass(eq=False)
class Declaration(Container):
    """A declared entity: class, function, property, enum member, type alias..."""

    variant: ClassVar[ReflectionVariant] = ReflectionVariant.DECLARATION

    # Qualified name of the entity this definition is inherited from
    inherited_from: Optional[str] = None
    signatures: List[Signature] = field(default_factory=list)
    index_signature: Optional[Signature] = None
    get_signature: Optional[Signature] = None
    set_signature: Optional[Signature] = None
    type_parameters: List[TypeParameter] = field(default_factory=list)
    # Synthesized object/function type declared inline as this entity's type
    type_declaration: Optional["Declaration"] = None
    default_value: Optional[str] = None

    def get_non_index_signatures(self) -> List[Signature]:
        """Call signatures followed by accessor signatures; never the index signature."""
        result = list(self.signatures)
        if self.get_signature is not None:
            result.append(self.get_signature)
        if self.set_signature is not None:
            result.append(self.set_signature)
        return result

    def owned(self) -> Iterator[Entity]:
        yield from self.type_parameters
        yield from self.children
        yield from self.signatures
        for sig in (self.index_signature, self.get_signature, self.set_signature):
            if sig is not None:
                yield sig
        if self.type_declaration is not None:
            yield self.type_declaration


@dataclass(eq=False)
class Project(Container):
    """Root container of a documented project."""

    variant: ClassVar[ReflectionVariant] = ReflectionVariant.PROJECT

    kind: KindLike = EntityKind.PROJECT


def walk(entity: Entity) -> Iterator[Entity]:
    """Yield entity and everything it owns, depth-first, pre-order."""
    stack = [entity]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(current.owned())))
