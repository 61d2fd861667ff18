"""Integration tests: docgroup group on the testing_grounds entity graph."""

from __future__ import annotations

import io
import json
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from docgroup.commands.group_cmd import run as group_run

REPO_ROOT = Path(__file__).resolve().parent.parent.parent
TESTING_GROUNDS = REPO_ROOT / "testing_grounds"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))


@pytest.fixture
def graph(tmp_path: Path) -> Path:
    if not TESTING_GROUNDS.is_dir():
        pytest.skip("testing_grounds not found")
    dest = tmp_path / "project"
    shutil.copytree(TESTING_GROUNDS, dest)
    return dest / "graph.json"


def _args(path: Path, **kwargs):
    values = {"path": path, "format": "text", "sort": None, "no_categories": False}
    values.update(kwargs)
    return type("Args", (), values)()


def _run(args) -> str:
    buf = io.StringIO()
    with patch("docgroup.commands.group_cmd.sys.stdout", buf):
        group_run(args)
    return buf.getvalue()


def test_group_text_output(graph: Path) -> None:
    out = _run(_args(graph))
    lines = out.splitlines()
    assert lines[0] == "generic-function (Project)"
    assert "  Enumerations (1) [external]" in lines
    assert "  Classes (1)" in lines
    assert "  Generics (3)" in lines
    assert "    # Arrays" in lines
    assert "  Functions (1)" in lines
    assert "  Box (Class)" in lines
    assert "    Methods (1) [inherited]" in lines
    assert lines.index("  Enumerations (1) [external]") < lines.index("  Generics (3)")


def test_group_json_output(graph: Path) -> None:
    out = _run(_args(graph, format="json"))
    data = json.loads(out)
    assert data["name"] == "generic-function"
    assert [g["title"] for g in data["groups"]] == ["Enumerations", "Classes", "Generics", "Functions"]


def test_group_sort_override(graph: Path) -> None:
    out = _run(_args(graph, format="json", sort="enum-value-ascending"))
    data = json.loads(out)
    shape = next(c for c in data["children"] if c["name"] == "Shape")
    assert shape["groups"][0]["children"] == ["Triangle", "Square"]
    # No strategy orders the top level, so input order is kept
    assert [g["title"] for g in data["groups"]] == ["Generics", "Functions", "Classes", "Enumerations"]


def test_group_uses_project_config(graph: Path) -> None:
    config_dir = graph.parent / ".docgroup"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(
        json.dumps({"categories": {"default": "Misc"}}), encoding="utf-8"
    )
    data = json.loads(_run(_args(graph, format="json")))
    generics = next(g for g in data["groups"] if g["title"] == "Generics")
    assert [c["title"] for c in generics["categories"]] == ["Arrays", "Misc"]


def test_group_no_categories(graph: Path) -> None:
    data = json.loads(_run(_args(graph, format="json", no_categories=True)))
    assert all("categories" not in g for g in data["groups"])


def test_group_invalid_sort_exits(graph: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        group_run(_args(graph, sort="kind,by-color"))
    assert exc.value.code == 1
    assert "Unknown sort strategy" in capsys.readouterr().err


def test_group_missing_file_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        group_run(_args(tmp_path / "nope.json"))
    assert exc.value.code == 1
    assert "Cannot read" in capsys.readouterr().err


@pytest.mark.parametrize(
    "settings, message",
    [
        ({"sort": 5}, "Sort strategies must be a list"),
        ({"categories": {"order": "Arrays"}}, "categories.order"),
    ],
)
def test_group_malformed_config_exits(
    graph: Path, settings: dict, message: str, capsys: pytest.CaptureFixture[str]
) -> None:
    config_dir = graph.parent / ".docgroup"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps(settings), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        group_run(_args(graph))
    assert exc.value.code == 1
    assert message in capsys.readouterr().err


def test_group_malformed_graph_exits(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text(
        json.dumps({"name": "p", "children": [{"name": "a", "kind": "Function", "signatures": [None]}]}),
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as exc:
        group_run(_args(bad))
    assert exc.value.code == 1
    assert "signatures[0]: expected an object" in capsys.readouterr().err
