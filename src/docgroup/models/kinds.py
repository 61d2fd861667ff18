"""Entity kinds and reflection variants."""

from __future__ import annotations

from enum import Enum
from typing import Union


class EntityKind(Enum):
    """Syntactic category of a documented entity.

    Values are the symbolic names; human-readable labels are derived from them.
    """

    PROJECT = "Project"
    MODULE = "Module"
    NAMESPACE = "Namespace"
    ENUM = "Enum"
    ENUM_MEMBER = "EnumMember"
    VARIABLE = "Variable"
    FUNCTION = "Function"
    CLASS = "Class"
    INTERFACE = "Interface"
    CONSTRUCTOR = "Constructor"
    PROPERTY = "Property"
    METHOD = "Method"
    CALL_SIGNATURE = "CallSignature"
    INDEX_SIGNATURE = "IndexSignature"
    CONSTRUCTOR_SIGNATURE = "ConstructorSignature"
    PARAMETER = "Parameter"
    TYPE_LITERAL = "TypeLiteral"
    TYPE_PARAMETER = "TypeParameter"
    ACCESSOR = "Accessor"
    GET_SIGNATURE = "GetSignature"
    SET_SIGNATURE = "SetSignature"
    TYPE_ALIAS = "TypeAlias"
    REFERENCE = "Reference"


# A kind read from external data that is not in EntityKind stays a plain string.
KindLike = Union[EntityKind, str]


def parse_kind(value: str) -> KindLike:
    """Return the EntityKind for value, or value itself if it is not a known kind."""
    try:
        return EntityKind(value)
    except ValueError:
        return value


def kind_key(kind: KindLike) -> str:
    """Symbolic name of a kind (the raw string for unknown kinds)."""
    if isinstance(kind, EntityKind):
        return kind.value
    return str(kind)


class ReflectionVariant(Enum):
    """Closed set of entity shapes. Only DECLARATION carries inheritance."""

    PROJECT = "project"
    DECLARATION = "declaration"
    SIGNATURE = "signature"
    PARAMETER = "parameter"
    TYPE_PARAMETER = "type_parameter"
