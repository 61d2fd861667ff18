"""Resolution pass: fires per-entity and end events, and groups containers on them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from docgroup.models import Container, Entity, Project, walk

from .categories import (
    DEFAULT_CATEGORY,
    CategoryNames,
    category_settings,
    get_reflection_categories,
)
from .grouper import get_reflection_groups
from .kind_names import DEFAULT_NAMER, KindNamer
from .sort import DEFAULT_SORT, sort_reflections, validate_sort_strategies

logger = logging.getLogger(__name__)

ResolveListener = Callable[[Entity], None]
EndListener = Callable[[Project], None]
Sorter = Callable[[List[Entity], Sequence[str]], None]


@dataclass
class ResolutionEvents:
    """Explicitly registered listeners, called in registration order."""

    on_resolve: List[ResolveListener] = field(default_factory=list)
    on_end: List[EndListener] = field(default_factory=list)


def resolve_project(project: Project, events: ResolutionEvents) -> None:
    """Fire on_resolve once per entity in traversal order, then on_end once."""
    count = 0
    for entity in walk(project):
        for listener in events.on_resolve:
            listener(entity)
        count += 1
    for listener in events.on_end:
        listener(project)
    logger.debug("Resolved %d entities in %s", count, project.name)


def _is_container(entity: Entity) -> bool:
    return isinstance(entity, Container)


class GroupResolver:
    """
    Assigns kind labels and groups containers during resolution.

    Grouping a container happens at most once: containers without children or
    with groups already set are skipped, so children are never re-sorted and
    tags are never consumed twice.
    """

    def __init__(
        self,
        sort_strategies: Optional[Sequence[str]] = None,
        sorter: Sorter = sort_reflections,
        namer: KindNamer = DEFAULT_NAMER,
    ) -> None:
        self.sort_strategies = validate_sort_strategies(
            DEFAULT_SORT if sort_strategies is None else sort_strategies
        )
        self._sorter = sorter
        self._namer = namer

    def attach(self, events: ResolutionEvents) -> None:
        events.on_resolve.append(self.on_resolve)
        events.on_end.append(self.on_end_resolve)

    def on_resolve(self, entity: Entity) -> None:
        entity.kind_string = self._namer.singular(entity.kind)
        if _is_container(entity):
            self.group(entity)

    def on_end_resolve(self, project: Project) -> None:
        # The root may not have been visited as a plain entity
        self.group(project)

    def group(self, container: Container) -> None:
        if not container.children or container.groups:
            logger.debug("Skipping grouping for %s", container.name)
            return
        self._sorter(container.children, self.sort_strategies)
        container.groups = get_reflection_groups(container.children, self._namer)


class CategoryResolver:
    """Categorizes the members of every group once its container is grouped."""

    def __init__(
        self,
        default_category: str = DEFAULT_CATEGORY,
        order: Sequence[str] = (),
    ) -> None:
        self.default_category = default_category
        self.order = list(order)
        self._names = CategoryNames()
        self._done: set = set()

    def attach(self, events: ResolutionEvents) -> None:
        events.on_resolve.append(self.on_resolve)
        events.on_end.append(self.on_end_resolve)

    def on_resolve(self, entity: Entity) -> None:
        if _is_container(entity):
            self.categorize(entity)

    def on_end_resolve(self, project: Project) -> None:
        self.categorize(project)

    def categorize(self, container: Container) -> None:
        if not container.groups or container in self._done:
            return
        self._done.add(container)
        for group in container.groups:
            group.categories = get_reflection_categories(
                group.children,
                names=self._names,
                default_category=self.default_category,
                order=self.order,
            )


def group_project(project: Project, config: Optional[dict[str, Any]] = None) -> Project:
    """
    Run a full resolution pass over project using config ('sort' and
    'categories' sections). Returns project, annotated in place.

    Raises:
        ValueError: If either config section is malformed.
    """
    config = config or {}
    events = ResolutionEvents()
    GroupResolver(config.get("sort")).attach(events)
    enabled, default_category, order = category_settings(config.get("categories"))
    if enabled:
        CategoryResolver(default_category=default_category, order=order).attach(events)
    resolve_project(project, events)
    return project
