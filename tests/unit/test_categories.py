"""Unit tests for category partitioning and ordering."""

from __future__ import annotations

import pytest

from docgroup.grouping.categories import (
    CategoryNames,
    category_settings,
    get_reflection_categories,
    sort_categories,
)
from docgroup.models import Category, Comment, CommentTag, CommentDisplayPart, Declaration, EntityKind


def _decl(name: str, *categories: str) -> Declaration:
    comment = Comment(
        block_tags=[
            CommentTag(tag="@category", content=[CommentDisplayPart(kind="text", text=c)])
            for c in categories
        ]
    )
    return Declaration(name=name, kind=EntityKind.FUNCTION, comment=comment)


def test_no_categories_declared() -> None:
    assert get_reflection_categories([_decl("a"), _decl("b")]) is None


def test_untagged_members_go_to_default() -> None:
    cats = get_reflection_categories([_decl("a", "Zed"), _decl("b"), _decl("c", "Alpha", "Zed")])
    assert [c.title for c in cats] == ["Alpha", "Zed", "Other"]
    by_title = {c.title: [m.name for m in c.children] for c in cats}
    assert by_title == {"Alpha": ["c"], "Zed": ["a", "c"], "Other": ["b"]}


def test_custom_default_and_order() -> None:
    cats = get_reflection_categories(
        [_decl("a", "Beta"), _decl("b"), _decl("c", "Alpha")],
        default_category="Misc",
        order=["Misc", "Beta"],
    )
    assert [c.title for c in cats] == ["Misc", "Beta", "Alpha"]


def test_sort_categories_case_insensitive() -> None:
    cats = [Category("beta"), Category("Other"), Category("Alpha")]
    assert [c.title for c in sort_categories(cats)] == ["Alpha", "beta", "Other"]


def test_category_names_cached() -> None:
    decl = _decl("a", "IO")
    names = CategoryNames()
    assert names.get(decl) == ["IO"]
    assert decl.comment.block_tags == []
    assert names.get(decl) == ["IO"]


def test_category_settings_defaults() -> None:
    assert category_settings(None) == (True, "Other", [])
    assert category_settings({"enabled": False, "default": "Misc", "order": ["IO"]}) == (
        False,
        "Misc",
        ["IO"],
    )


@pytest.mark.parametrize(
    "section, message",
    [
        ("IO", r"categories: expected an object"),
        ({"order": "IO"}, r"categories\.order"),
        ({"order": ["IO", 1]}, r"categories\.order"),
        ({"default": 3}, r"categories\.default"),
        ({"enabled": "yes"}, r"categories\.enabled"),
    ],
)
def test_category_settings_rejects_bad_values(section, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        category_settings(section)
