"""Categorize the members of each group by their '@category' tags."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from docgroup.models import Category, Entity

from .tags import get_categories

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Other"


def category_settings(config: Any) -> Tuple[bool, str, List[str]]:
    """
    Validate the 'categories' config section; return (enabled, default, order).

    Raises:
        ValueError: If a value has the wrong type.
    """
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError("categories: expected an object")
    enabled = config.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ValueError(f"categories.enabled: expected true or false, got {enabled!r}")
    default = config.get("default") or DEFAULT_CATEGORY
    if not isinstance(default, str):
        raise ValueError(f"categories.default: expected a string, got {default!r}")
    order = config.get("order") or []
    if not isinstance(order, list) or not all(isinstance(title, str) for title in order):
        raise ValueError(f"categories.order: expected a list of strings, got {order!r}")
    return enabled, default, list(order)


def sort_categories(
    categories: List[Category],
    order: Sequence[str] = (),
    default_category: str = DEFAULT_CATEGORY,
) -> List[Category]:
    """
    Titles listed in order come first, in that order; the rest follow
    alphabetically, with the default category last unless it is listed.
    """
    explicit = {title: i for i, title in enumerate(order)}

    def key(category: Category) -> tuple:
        if category.title in explicit:
            return (0, explicit[category.title], "")
        if category.title == default_category:
            return (2, 0, "")
        return (1, 0, category.title.casefold())

    return sorted(categories, key=key)


class CategoryNames:
    """
    Per-pass cache of each entity's declared categories.

    '@category' tags are consumed on first read, so an entity that is a member
    of several groups must be looked up here rather than re-extracted.
    """

    def __init__(self) -> None:
        self._names: Dict[Entity, List[str]] = {}

    def get(self, reflection: Entity) -> List[str]:
        names = self._names.get(reflection)
        if names is None:
            names = get_categories(reflection)
            self._names[reflection] = names
        return names


def get_reflection_categories(
    reflections: Sequence[Entity],
    names: Optional[CategoryNames] = None,
    default_category: str = DEFAULT_CATEGORY,
    order: Sequence[str] = (),
) -> Optional[List[Category]]:
    """
    Partition reflections into categories.

    Returns None when no reflection declares a category; otherwise untagged
    reflections land in default_category.
    """
    names = names or CategoryNames()
    declared = [(child, names.get(child)) for child in reflections]
    if not any(child_names for _, child_names in declared):
        return None

    categories: Dict[str, Category] = {}
    for child, child_names in declared:
        for title in child_names or [default_category]:
            category = categories.get(title)
            if category is None:
                category = Category(title=title)
                categories[title] = category
            category.children.append(child)

    logger.debug("Categorized %d reflection(s) into %s", len(reflections), ", ".join(categories))
    return sort_categories(list(categories.values()), order, default_category)
