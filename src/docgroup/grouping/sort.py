"""Configurable multi-key sorting of sibling entities before grouping."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from docgroup.models import Entity, EntityKind

# Strict "a sorts before b" predicate
SortPredicate = Callable[[Entity, Entity], bool]

DEFAULT_SORT: List[str] = ["kind", "instance-first", "alphabetical"]

KIND_SORT_ORDER: List[EntityKind] = [
    EntityKind.REFERENCE,
    EntityKind.PROJECT,
    EntityKind.MODULE,
    EntityKind.NAMESPACE,
    EntityKind.ENUM,
    EntityKind.ENUM_MEMBER,
    EntityKind.CLASS,
    EntityKind.INTERFACE,
    EntityKind.TYPE_ALIAS,
    EntityKind.CONSTRUCTOR,
    EntityKind.PROPERTY,
    EntityKind.VARIABLE,
    EntityKind.FUNCTION,
    EntityKind.ACCESSOR,
    EntityKind.METHOD,
    EntityKind.PARAMETER,
    EntityKind.TYPE_PARAMETER,
    EntityKind.TYPE_LITERAL,
    EntityKind.CALL_SIGNATURE,
    EntityKind.CONSTRUCTOR_SIGNATURE,
    EntityKind.INDEX_SIGNATURE,
    EntityKind.GET_SIGNATURE,
    EntityKind.SET_SIGNATURE,
]

_KIND_WEIGHTS: Dict[EntityKind, int] = {kind: i for i, kind in enumerate(KIND_SORT_ORDER)}


def _kind_weight(entity: Entity) -> int:
    # Unknown kinds sort after every known kind
    return _KIND_WEIGHTS.get(entity.kind, len(KIND_SORT_ORDER))


def _source_key(entity: Entity) -> Optional[tuple]:
    if not entity.sources:
        return None
    src = entity.sources[0]
    return (src.file_name, src.line, src.character)


def _enum_value(entity: Entity) -> Optional[float]:
    if entity.kind is not EntityKind.ENUM_MEMBER:
        return None
    value = getattr(entity, "default_value", None)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _source_order(a: Entity, b: Entity) -> bool:
    ka, kb = _source_key(a), _source_key(b)
    if ka is None or kb is None:
        return False
    return ka < kb


def _alphabetical(a: Entity, b: Entity) -> bool:
    return (a.name.casefold(), a.name) < (b.name.casefold(), b.name)


def _enum_value_ascending(a: Entity, b: Entity) -> bool:
    va, vb = _enum_value(a), _enum_value(b)
    if va is None or vb is None:
        return False
    return va < vb


def _enum_value_descending(a: Entity, b: Entity) -> bool:
    va, vb = _enum_value(a), _enum_value(b)
    if va is None or vb is None:
        return False
    return vb < va


def _static_first(a: Entity, b: Entity) -> bool:
    return a.flags.is_static and not b.flags.is_static


def _instance_first(a: Entity, b: Entity) -> bool:
    return not a.flags.is_static and b.flags.is_static


def _visibility_rank(entity: Entity) -> int:
    if entity.flags.is_private:
        return 2
    if entity.flags.is_protected:
        return 1
    return 0


def _visibility(a: Entity, b: Entity) -> bool:
    return _visibility_rank(a) < _visibility_rank(b)


def _required_first(a: Entity, b: Entity) -> bool:
    return not a.flags.is_optional and b.flags.is_optional


def _kind(a: Entity, b: Entity) -> bool:
    return _kind_weight(a) < _kind_weight(b)


SORT_STRATEGIES: Dict[str, SortPredicate] = {
    "source-order": _source_order,
    "alphabetical": _alphabetical,
    "enum-value-ascending": _enum_value_ascending,
    "enum-value-descending": _enum_value_descending,
    "static-first": _static_first,
    "instance-first": _instance_first,
    "visibility": _visibility,
    "required-first": _required_first,
    "kind": _kind,
}


def validate_sort_strategies(strategies: Iterable[str]) -> List[str]:
    """
    Return strategies as a list. A comma-separated string is accepted too.

    Raises:
        ValueError: If strategies is not a string or list of strings, or a
            strategy name is not known.
    """
    if isinstance(strategies, str):
        strategies = [name.strip() for name in strategies.split(",") if name.strip()]
    if not isinstance(strategies, (list, tuple)):
        raise ValueError(f"Sort strategies must be a list of names, got {type(strategies).__name__}")
    result = list(strategies)
    for name in result:
        if not isinstance(name, str):
            raise ValueError(f"Sort strategy names must be strings, got {name!r}")
        if name not in SORT_STRATEGIES:
            known = ", ".join(SORT_STRATEGIES)
            raise ValueError(f"Unknown sort strategy: {name!r} (expected one of: {known})")
    return result


def sort_reflections(reflections: List[Entity], strategies: Sequence[str]) -> None:
    """
    Sort reflections in place. The first strategy that orders a pair decides;
    pairs no strategy orders keep their original relative order.
    """
    predicates = [SORT_STRATEGIES[name] for name in validate_sort_strategies(strategies)]

    def compare(a: Entity, b: Entity) -> int:
        for before in predicates:
            if before(a, b):
                return -1
            if before(b, a):
                return 1
        return 0

    reflections.sort(key=cmp_to_key(compare))
