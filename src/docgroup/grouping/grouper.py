"""Partition sorted entities into named groups and compute group aggregates."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from docgroup.models import Entity, Group, ReflectionVariant

from .kind_names import DEFAULT_NAMER, KindNamer
from .tags import get_groups

logger = logging.getLogger(__name__)


def compute_group_flags(group: Group) -> Group:
    """
    AND-reduce member flags into the group's four aggregates.

    Only declarations can be inherited; any other member makes
    all_children_are_inherited false.
    """
    all_inherited = True
    all_private = True
    all_protected = True
    all_external = True

    for child in group.children:
        all_private = all_private and child.flags.is_private
        all_protected = all_protected and (child.flags.is_private or child.flags.is_protected)
        all_external = all_external and child.flags.is_external

        if child.variant is ReflectionVariant.DECLARATION:
            all_inherited = all_inherited and bool(child.inherited_from)
        else:
            all_inherited = False

    group.all_children_are_inherited = all_inherited
    group.all_children_are_private = all_private
    group.all_children_are_protected_or_private = all_protected
    group.all_children_are_external = all_external
    return group


def get_reflection_groups(
    reflections: Sequence[Entity], namer: KindNamer = DEFAULT_NAMER
) -> List[Group]:
    """
    Group reflections (already sorted) by their explicit or kind-derived group names.

    Groups come out in order of first appearance; an entity tagged with several
    groups is a member of each, in tag order.
    """
    groups: Dict[str, Group] = {}
    for child in reflections:
        for name in get_groups(child, namer):
            group = groups.get(name)
            if group is None:
                group = Group(title=name)
                groups[name] = group
            group.children.append(child)

    for group in groups.values():
        compute_group_flags(group)

    logger.debug(
        "Grouped %d reflection(s) into %d group(s): %s",
        len(reflections),
        len(groups),
        ", ".join(groups),
    )
    return list(groups.values())
