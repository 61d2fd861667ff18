"""Human-readable singular and plural labels for entity kinds."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional

from docgroup.models.kinds import EntityKind, KindLike, kind_key

# Kinds whose natural-language name is not derived mechanically
SINGULARS: Mapping[EntityKind, str] = MappingProxyType(
    {
        EntityKind.ENUM: "Enumeration",
        EntityKind.ENUM_MEMBER: "Enumeration member",
    }
)

PLURALS: Mapping[EntityKind, str] = MappingProxyType(
    {
        EntityKind.CLASS: "Classes",
        EntityKind.PROPERTY: "Properties",
        EntityKind.ENUM: "Enumerations",
        EntityKind.ENUM_MEMBER: "Enumeration members",
        EntityKind.TYPE_ALIAS: "Type aliases",
    }
)

_WORD_BOUNDARY = re.compile(r"(.)([A-Z])")


def kind_string(kind: KindLike) -> str:
    """
    Derive a label from the kind's symbolic name: 'TypeAlias' -> 'Type alias'.

    Unknown kinds (plain strings) go through the same derivation.
    """
    return _WORD_BOUNDARY.sub(lambda m: m.group(1) + " " + m.group(2).lower(), kind_key(kind))


class KindNamer:
    """Maps kinds to labels using override tables, falling back to kind_string."""

    def __init__(
        self,
        singulars: Optional[Mapping[EntityKind, str]] = None,
        plurals: Optional[Mapping[EntityKind, str]] = None,
    ) -> None:
        self._singulars = MappingProxyType(dict(SINGULARS if singulars is None else singulars))
        self._plurals = MappingProxyType(dict(PLURALS if plurals is None else plurals))

    def singular(self, kind: KindLike) -> str:
        if kind in self._singulars:
            return self._singulars[kind]
        return kind_string(kind)

    def plural(self, kind: KindLike) -> str:
        if kind in self._plurals:
            return self._plurals[kind]
        return kind_string(kind) + "s"


DEFAULT_NAMER = KindNamer()


def get_kind_singular(kind: KindLike) -> str:
    """Singular label for kind using the default override tables."""
    return DEFAULT_NAMER.singular(kind)


def get_kind_plural(kind: KindLike) -> str:
    """Plural label for kind using the default override tables."""
    return DEFAULT_NAMER.plural(kind)
