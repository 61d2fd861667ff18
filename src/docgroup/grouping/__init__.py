"""Sorting, grouping and categorization of documented entities."""

from .categories import DEFAULT_CATEGORY, category_settings, get_reflection_categories
from .grouper import compute_group_flags, get_reflection_groups
from .kind_names import KindNamer, get_kind_plural, get_kind_singular, kind_string
from .resolver import (
    CategoryResolver,
    GroupResolver,
    ResolutionEvents,
    group_project,
    resolve_project,
)
from .sort import DEFAULT_SORT, SORT_STRATEGIES, sort_reflections, validate_sort_strategies
from .tags import CATEGORY_TAG, GROUP_TAG, extract_tags, get_groups, get_tag_values

__all__ = [
    "CATEGORY_TAG",
    "CategoryResolver",
    "DEFAULT_CATEGORY",
    "DEFAULT_SORT",
    "GROUP_TAG",
    "GroupResolver",
    "KindNamer",
    "ResolutionEvents",
    "SORT_STRATEGIES",
    "category_settings",
    "compute_group_flags",
    "extract_tags",
    "get_groups",
    "get_kind_plural",
    "get_kind_singular",
    "get_reflection_categories",
    "get_reflection_groups",
    "get_tag_values",
    "group_project",
    "kind_string",
    "resolve_project",
    "sort_reflections",
    "validate_sort_strategies",
]
