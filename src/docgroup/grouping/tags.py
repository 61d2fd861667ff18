"""
Extraction of explicit group/category tags from entity comments.

Extraction is two-phase: extract_tags() only reads a comment and reports the
tag values plus the residual tag list; commit_residual() writes that residual
back. get_tag_values() does both for every comment attached to an entity, so
matched tags are consumed and never reach rendered documentation.

get_groups() and get_categories() share the same "explicit tag, else
fallback" contract; any other categorization pass should go through
get_tag_values() to stay consistent with them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from docgroup.models import Comment, CommentTag, Entity, ReflectionVariant

from .kind_names import DEFAULT_NAMER, KindNamer

logger = logging.getLogger(__name__)

GROUP_TAG = "@group"
CATEGORY_TAG = "@category"


@dataclass
class TagExtraction:
    """Values found for a tag and the comment's block tags with those tags removed."""

    values: List[str]
    residual: List[CommentTag]


def extract_tags(comment: Optional[Comment], tag_name: str) -> TagExtraction:
    """Read tag_name values (trimmed, in tag order) from comment without modifying it."""
    if comment is None:
        return TagExtraction(values=[], residual=[])
    values: List[str] = []
    residual: List[CommentTag] = []
    for tag in comment.block_tags:
        if tag.tag == tag_name:
            values.append(tag.text().strip())
        else:
            residual.append(tag)
    return TagExtraction(values=values, residual=residual)


def commit_residual(comment: Optional[Comment], extraction: TagExtraction) -> None:
    """Replace comment's block tags with the residual list of an extraction."""
    if comment is not None:
        comment.block_tags = extraction.residual


def _tagged_comments(reflection: Entity) -> Iterator[Comment]:
    """Own comment, non-index signature comments, then the nested type declaration's."""
    if reflection.comment is not None:
        yield reflection.comment
    if reflection.variant is not ReflectionVariant.DECLARATION:
        return
    for sig in reflection.get_non_index_signatures():
        if sig.comment is not None:
            yield sig.comment
    nested = reflection.type_declaration
    if nested is not None:
        if nested.comment is not None:
            yield nested.comment
        for sig in nested.get_non_index_signatures():
            if sig.comment is not None:
                yield sig.comment


def get_tag_values(reflection: Entity, tag_name: str) -> List[str]:
    """
    Collect and consume every tag_name tag attached to reflection.

    Returns unique non-empty values in first-seen order.
    """
    found: dict[str, None] = {}
    for comment in _tagged_comments(reflection):
        extraction = extract_tags(comment, tag_name)
        if extraction.values:
            commit_residual(comment, extraction)
            logger.debug(
                "Consumed %d %s tag(s) on %s", len(extraction.values), tag_name, reflection.name
            )
        for value in extraction.values:
            found.setdefault(value, None)
    found.pop("", None)
    return list(found)


def get_groups(reflection: Entity, namer: KindNamer = DEFAULT_NAMER) -> List[str]:
    """Group names declared on reflection via '@group', else its plural kind label."""
    groups = get_tag_values(reflection, GROUP_TAG)
    if not groups:
        groups = [namer.plural(reflection.kind)]
    return groups


def get_categories(reflection: Entity) -> List[str]:
    """Category names declared via '@category'; empty when none are declared."""
    return get_tag_values(reflection, CATEGORY_TAG)
