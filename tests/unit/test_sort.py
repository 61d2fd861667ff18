"""Unit tests for sort strategies."""

from __future__ import annotations

import pytest

from docgroup.grouping.sort import (
    DEFAULT_SORT,
    SORT_STRATEGIES,
    sort_reflections,
    validate_sort_strategies,
)
from docgroup.models import Declaration, EntityKind, ReflectionFlags, SourceReference


def _names(items) -> list[str]:
    return [i.name for i in items]


def test_default_sort() -> None:
    assert DEFAULT_SORT == ["kind", "instance-first", "alphabetical"]
    items = [
        Declaration(name="b", kind=EntityKind.METHOD),
        Declaration(name="s", kind=EntityKind.METHOD, flags=ReflectionFlags(is_static=True)),
        Declaration(name="a", kind=EntityKind.METHOD),
        Declaration(name="ctor", kind=EntityKind.CONSTRUCTOR),
        Declaration(name="p", kind=EntityKind.PROPERTY),
    ]
    sort_reflections(items, DEFAULT_SORT)
    assert _names(items) == ["ctor", "p", "a", "b", "s"]


def test_alphabetical_is_case_insensitive() -> None:
    items = [Declaration(name=n, kind=EntityKind.FUNCTION) for n in ["beta", "Alpha", "alpha", "Gamma"]]
    sort_reflections(items, ["alphabetical"])
    assert _names(items) == ["Alpha", "alpha", "beta", "Gamma"]


def test_sort_is_stable_when_no_strategy_decides() -> None:
    items = [Declaration(name=n, kind=EntityKind.FUNCTION) for n in ["c", "a", "b"]]
    sort_reflections(items, ["kind"])
    assert _names(items) == ["c", "a", "b"]


def test_source_order() -> None:
    items = [
        Declaration(name="x", kind=EntityKind.FUNCTION, sources=[SourceReference("b.ts", 1)]),
        Declaration(name="y", kind=EntityKind.FUNCTION, sources=[SourceReference("a.ts", 20)]),
        Declaration(name="z", kind=EntityKind.FUNCTION, sources=[SourceReference("a.ts", 3, 4)]),
    ]
    sort_reflections(items, ["source-order"])
    assert _names(items) == ["z", "y", "x"]


def test_enum_value_ordering() -> None:
    def member(name: str, value: str) -> Declaration:
        return Declaration(name=name, kind=EntityKind.ENUM_MEMBER, default_value=value)

    items = [member("two", "2"), member("ten", "10"), member("one", "1")]
    sort_reflections(items, ["enum-value-ascending"])
    assert _names(items) == ["one", "two", "ten"]
    sort_reflections(items, ["enum-value-descending"])
    assert _names(items) == ["ten", "two", "one"]


def test_visibility_and_required_first() -> None:
    items = [
        Declaration(name="priv", kind=EntityKind.PROPERTY, flags=ReflectionFlags(is_private=True)),
        Declaration(name="prot", kind=EntityKind.PROPERTY, flags=ReflectionFlags(is_protected=True)),
        Declaration(name="pub", kind=EntityKind.PROPERTY),
    ]
    sort_reflections(items, ["visibility"])
    assert _names(items) == ["pub", "prot", "priv"]

    items = [
        Declaration(name="opt", kind=EntityKind.PROPERTY, flags=ReflectionFlags(is_optional=True)),
        Declaration(name="req", kind=EntityKind.PROPERTY),
    ]
    sort_reflections(items, ["required-first"])
    assert _names(items) == ["req", "opt"]


def test_static_first() -> None:
    items = [
        Declaration(name="inst", kind=EntityKind.METHOD),
        Declaration(name="stat", kind=EntityKind.METHOD, flags=ReflectionFlags(is_static=True)),
    ]
    sort_reflections(items, ["static-first"])
    assert _names(items) == ["stat", "inst"]


def test_unknown_kind_sorts_last() -> None:
    items = [
        Declaration(name="w", kind="Widget"),
        Declaration(name="f", kind=EntityKind.FUNCTION),
    ]
    sort_reflections(items, ["kind"])
    assert _names(items) == ["f", "w"]


def test_validate_sort_strategies() -> None:
    assert validate_sort_strategies(("kind", "alphabetical")) == ["kind", "alphabetical"]
    assert set(SORT_STRATEGIES) >= {"source-order", "visibility", "kind"}
    with pytest.raises(ValueError, match="Unknown sort strategy"):
        validate_sort_strategies(["kind", "by-mood"])


@pytest.mark.parametrize("value", [5, None, {"kind": True}, ["kind", 3]])
def test_validate_sort_strategies_rejects_non_lists(value) -> None:
    with pytest.raises(ValueError, match="Sort strateg"):
        validate_sort_strategies(value)


def test_validate_sort_strategies_accepts_comma_string() -> None:
    assert validate_sort_strategies("kind, alphabetical") == ["kind", "alphabetical"]
