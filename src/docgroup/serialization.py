"""Load entity graphs from JSON and dump computed groups back to JSON-ready dicts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

from docgroup.models import (
    Comment,
    CommentDisplayPart,
    CommentTag,
    Container,
    Declaration,
    EntityKind,
    Parameter,
    Project,
    ReflectionFlags,
    Signature,
    SourceReference,
    TypeParameter,
    kind_key,
    parse_kind,
)

_FLAG_FIELDS = ("is_private", "is_protected", "is_external", "is_static", "is_optional")


def _require_dict(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")
    return data


def _require_list(data: dict[str, Any], key: str, where: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{where}.{key}: expected a list")
    return value


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{where}.{key}: expected a string")
    return value


def _optional_int(data: dict[str, Any], key: str, where: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}.{key}: expected an integer")
    return value


def _display_parts(value: Any, where: str) -> List[CommentDisplayPart]:
    """Content may be plain text or a list of {kind, text} parts (or strings)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [CommentDisplayPart(kind="text", text=value)]
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected text or a list of display parts")
    parts: List[CommentDisplayPart] = []
    for i, item in enumerate(value):
        if isinstance(item, str):
            parts.append(CommentDisplayPart(kind="text", text=item))
            continue
        item = _require_dict(item, f"{where}[{i}]")
        parts.append(
            CommentDisplayPart(
                kind=item.get("kind") or "text",
                text=_require_str(item, "text", f"{where}[{i}]"),
            )
        )
    return parts


def _comment(data: Any, where: str) -> Optional[Comment]:
    if data is None:
        return None
    data = _require_dict(data, where)
    tags: List[CommentTag] = []
    for i, raw in enumerate(_require_list(data, "block_tags", where)):
        tag_where = f"{where}.block_tags[{i}]"
        raw = _require_dict(raw, tag_where)
        tags.append(
            CommentTag(
                tag=_require_str(raw, "tag", tag_where),
                content=_display_parts(raw.get("content"), f"{tag_where}.content"),
            )
        )
    return Comment(
        summary=_display_parts(data.get("summary"), f"{where}.summary"),
        block_tags=tags,
        modifier_tags=[str(m) for m in _require_list(data, "modifier_tags", where)],
    )


def _flags(data: dict[str, Any], where: str) -> ReflectionFlags:
    raw = data.get("flags")
    if raw is None:
        return ReflectionFlags()
    raw = _require_dict(raw, f"{where}.flags")
    return ReflectionFlags(**{name: bool(raw.get(name, False)) for name in _FLAG_FIELDS})


def _sources(data: dict[str, Any], where: str) -> List[SourceReference]:
    result = []
    for i, raw in enumerate(_require_list(data, "sources", where)):
        raw = _require_dict(raw, f"{where}.sources[{i}]")
        result.append(
            SourceReference(
                file_name=_require_str(raw, "file_name", f"{where}.sources[{i}]"),
                line=_optional_int(raw, "line", f"{where}.sources[{i}]"),
                character=_optional_int(raw, "character", f"{where}.sources[{i}]"),
            )
        )
    return result


def _common(data: dict[str, Any], where: str) -> dict[str, Any]:
    return {
        "name": _require_str(data, "name", where),
        "flags": _flags(data, where),
        "comment": _comment(data.get("comment"), f"{where}.comment"),
        "sources": _sources(data, where),
    }


def _kind(data: dict[str, Any], where: str, default: EntityKind):
    if data.get("kind") is None:
        return default
    return parse_kind(_require_str(data, "kind", where))


def _type_parameters(data: dict[str, Any], where: str) -> List[TypeParameter]:
    return [
        TypeParameter(**_common(_require_dict(raw, f"{where}.type_parameters[{i}]"), f"{where}.type_parameters[{i}]"))
        for i, raw in enumerate(_require_list(data, "type_parameters", where))
    ]


def _signature(data: Any, where: str, default_kind: EntityKind) -> Optional[Signature]:
    if data is None:
        return None
    data = _require_dict(data, where)
    parameters = [
        Parameter(**_common(_require_dict(raw, f"{where}.parameters[{i}]"), f"{where}.parameters[{i}]"))
        for i, raw in enumerate(_require_list(data, "parameters", where))
    ]
    return Signature(
        kind=_kind(data, where, default_kind),
        parameters=parameters,
        type_parameters=_type_parameters(data, where),
        **_common(data, where),
    )


def _declaration(data: Any, where: str) -> Declaration:
    data = _require_dict(data, where)
    if data.get("kind") is None:
        raise ValueError(f"{where}.kind: expected a string")
    inherited = data.get("inherited_from")
    default_value = data.get("default_value")
    return Declaration(
        kind=_kind(data, where, EntityKind.VARIABLE),
        children=_children(data, where),
        inherited_from=str(inherited) if inherited else None,
        signatures=[
            _signature(
                _require_dict(raw, f"{where}.signatures[{i}]"),
                f"{where}.signatures[{i}]",
                EntityKind.CALL_SIGNATURE,
            )
            for i, raw in enumerate(_require_list(data, "signatures", where))
        ],
        index_signature=_signature(
            data.get("index_signature"), f"{where}.index_signature", EntityKind.INDEX_SIGNATURE
        ),
        get_signature=_signature(
            data.get("get_signature"), f"{where}.get_signature", EntityKind.GET_SIGNATURE
        ),
        set_signature=_signature(
            data.get("set_signature"), f"{where}.set_signature", EntityKind.SET_SIGNATURE
        ),
        type_parameters=_type_parameters(data, where),
        type_declaration=(
            _declaration(data["type_declaration"], f"{where}.type_declaration")
            if data.get("type_declaration") is not None
            else None
        ),
        default_value=None if default_value is None else str(default_value),
        **_common(data, where),
    )


def _children(data: dict[str, Any], where: str) -> List[Declaration]:
    return [
        _declaration(raw, f"{where}.children[{i}]")
        for i, raw in enumerate(_require_list(data, "children", where))
    ]


def project_from_dict(data: Any) -> Project:
    """
    Build a Project from a JSON-decoded entity graph.

    Raises:
        ValueError: If the graph is malformed (message names the field).
    """
    data = _require_dict(data, "project")
    return Project(children=_children(data, "project"), **_common(data, "project"))


def load_project(path: Path) -> Project:
    """Read an entity graph from a JSON file. Raises ValueError if unreadable or malformed."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return project_from_dict(data)


def groups_to_dict(container: Container) -> dict[str, Any]:
    """Dump container's groups and, recursively, those of grouped children."""
    result: dict[str, Any] = {
        "name": container.name,
        "kind": kind_key(container.kind),
        "kind_string": container.kind_string,
        "groups": [group.to_dict() for group in container.groups or []],
    }
    nested = [groups_to_dict(child) for child in container.children if child.groups]
    if nested:
        result["children"] = nested
    return result
