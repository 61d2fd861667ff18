"""Group command: resolve a JSON entity graph and print its groups."""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import TextIO

from docgroup.config import find_project_root, load_config
from docgroup.grouping import category_settings, group_project, validate_sort_strategies
from docgroup.models import Container, Group
from docgroup.serialization import groups_to_dict, load_project

logger = logging.getLogger(__name__)


def _flag_labels(group: Group) -> list[str]:
    labels = []
    if group.all_children_are_inherited:
        labels.append("inherited")
    if group.all_children_are_private:
        labels.append("private")
    elif group.all_children_are_protected_or_private:
        labels.append("protected")
    if group.all_children_are_external:
        labels.append("external")
    return labels


def _print_group(group: Group, indent: str, out: TextIO) -> None:
    labels = _flag_labels(group)
    suffix = f" [{', '.join(labels)}]" if labels else ""
    print(f"{indent}{group.title} ({len(group.children)}){suffix}", file=out)
    if group.categories:
        for category in group.categories:
            print(f"{indent}  # {category.title}", file=out)
            for child in category.children:
                print(f"{indent}    {child.name}", file=out)
    else:
        for child in group.children:
            print(f"{indent}  {child.name}", file=out)


def _print_container(container: Container, indent: str, out: TextIO) -> None:
    print(f"{indent}{container.name} ({container.kind_string})", file=out)
    for group in container.groups or []:
        _print_group(group, indent + "  ", out)
    for child in container.children:
        if child.groups:
            _print_container(child, indent + "  ", out)


def run(args: Namespace) -> None:
    """Run the group command."""
    path = Path(getattr(args, "path"))
    fmt = getattr(args, "format", "text")

    config = load_config(find_project_root(path))
    sort_arg = getattr(args, "sort", None)
    if sort_arg:
        config["sort"] = sort_arg

    try:
        config["sort"] = validate_sort_strategies(config.get("sort") or [])
        enabled, default_category, order = category_settings(config.get("categories"))
        project = load_project(path)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    config["categories"] = {
        "enabled": enabled and not getattr(args, "no_categories", False),
        "default": default_category,
        "order": order,
    }

    logger.debug("Grouping %s with sort %s", path.as_posix(), ",".join(config["sort"]))
    group_project(project, config)

    if fmt == "json":
        json.dump(groups_to_dict(project), sys.stdout, indent=2)
        print()
    else:
        _print_container(project, "", sys.stdout)
