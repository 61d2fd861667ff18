"""Integration tests: docgroup kinds."""

from __future__ import annotations

import io
import json
from unittest.mock import patch

from docgroup.commands.kinds_cmd import run as kinds_run
from docgroup.models import EntityKind


def _run(fmt: str) -> str:
    buf = io.StringIO()
    with patch("docgroup.commands.kinds_cmd.sys.stdout", buf):
        kinds_run(type("Args", (), {"format": fmt})())
    return buf.getvalue()


def test_kinds_json() -> None:
    rows = json.loads(_run("json"))
    assert len(rows) == len(EntityKind)
    by_kind = {r["kind"]: r for r in rows}
    assert by_kind["Enum"] == {"kind": "Enum", "singular": "Enumeration", "plural": "Enumerations"}
    assert by_kind["TypeAlias"]["plural"] == "Type aliases"


def test_kinds_text() -> None:
    out = _run("text")
    assert any(line.startswith("Class ") and line.endswith("Class / Classes") for line in out.splitlines())
