"""Tests for WidgetService — file-backed payload construction."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from netd3.config.settings import NetSettings
from netd3.domain.options import ForceStyle
from netd3.services.widget import WidgetService


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> NetSettings:
    monkeypatch.delenv("NETD3_CONFIG", raising=False)
    return NetSettings.from_cli(start=tmp_path)


@pytest.fixture
def mis_json(tmp_path: Path) -> Path:
    path = tmp_path / "mis.json"
    path.write_text(
        json.dumps(
            {
                "nodes": [
                    {"name": "Myriel", "group": 1, "size": 15},
                    {"name": "Napoleon", "group": 1, "size": 20},
                    {"name": "Cravatte", "group": 2, "size": 8},
                ],
                "links": [
                    {"source": 1, "target": 0, "value": 1},
                    {"source": 2, "target": 0, "value": 3},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


class TestBuildForce:
    """Tests for WidgetService.build_force()."""

    def test_json_document_for_both_tables(self, settings: NetSettings, mis_json: Path) -> None:
        result = WidgetService(settings).build_force(
            mis_json,
            mis_json,
            source="source",
            target="target",
            node_id="name",
            group="group",
            value="value",
            nodesize="size",
        )
        assert result.ok, result.error
        assert result.op == "build_force"
        assert result.data["widget"] == "forceNetwork"
        assert result.data["link_count"] == 2
        assert result.data["node_count"] == 3
        assert result.data["payload"]["options"]["nodesize"] is True

    def test_csv_tables(self, settings: NetSettings, tmp_path: Path) -> None:
        links = tmp_path / "links.csv"
        links.write_text("from,to\nA,B\nA,C\n", encoding="utf-8")
        nodes = tmp_path / "nodes.csv"
        nodes.write_text("id,team\nA,1\nB,1\nC,2\n", encoding="utf-8")
        result = WidgetService(settings).build_force(
            links, nodes, source="from", target="to", node_id="id", group="team"
        )
        assert result.ok, result.error
        assert result.data["payload"]["data"]["links"] == [
            {"source": 0, "target": 1},
            {"source": 0, "target": 2},
        ]

    def test_configured_defaults_applied(self, mis_json: Path, tmp_path: Path) -> None:
        settings = NetSettings.from_cli(start=tmp_path, force=ForceStyle(charge=-10))
        result = WidgetService(settings).build_force(
            mis_json, mis_json, source="source", target="target", node_id="name"
        )
        assert result.data["payload"]["options"]["charge"] == -10

    def test_style_overrides(self, settings: NetSettings, mis_json: Path) -> None:
        result = WidgetService(settings).build_force(
            mis_json,
            mis_json,
            source="source",
            target="target",
            node_id="name",
            style={"opacity": 0.4, "zoom": True},
        )
        options = result.data["payload"]["options"]
        assert options["opacity"] == 0.4
        assert options["zoom"] is True

    def test_missing_column_is_failure(self, settings: NetSettings, mis_json: Path) -> None:
        result = WidgetService(settings).build_force(
            mis_json, mis_json, source="from", target="target", node_id="name"
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MISSING_COLUMN"
        assert result.data == {}


class TestBuildOthers:
    """Tests for build_simple(), build_tree() and build_sankey()."""

    def test_simple_default_columns(self, settings: NetSettings, tmp_path: Path) -> None:
        path = tmp_path / "edges.csv"
        path.write_text("src,target\nA,B\nA,C\nB,C\n", encoding="utf-8")
        result = WidgetService(settings).build_simple(path)
        assert result.ok, result.error
        assert result.data["node_count"] == 3
        assert result.data["link_count"] == 3

    def test_tree(self, settings: NetSettings, tmp_path: Path) -> None:
        path = tmp_path / "tree.json"
        path.write_text(
            '{"name": "root", "children": [{"name": "a"}, {"name": "b", "children": []}]}',
            encoding="utf-8",
        )
        result = WidgetService(settings).build_tree(path, style={"diameter": 500})
        assert result.ok, result.error
        assert result.data["node_count"] == 3
        assert result.data["payload"]["sizing"]["width"] == 900

    def test_tree_rejects_array(self, settings: NetSettings, tmp_path: Path) -> None:
        path = tmp_path / "tree.json"
        path.write_text('[{"name": "root"}]', encoding="utf-8")
        result = WidgetService(settings).build_tree(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    def test_undecodable_csv_is_failure(self, settings: NetSettings, tmp_path: Path) -> None:
        path = tmp_path / "edges.csv"
        path.write_bytes(b"\xff\xfe")
        result = WidgetService(settings).build_simple(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    def test_sankey(self, settings: NetSettings, mis_json: Path) -> None:
        result = WidgetService(settings).build_sankey(
            mis_json,
            mis_json,
            source="source",
            target="target",
            value="value",
            node_id="name",
            units="TWh",
        )
        assert result.ok, result.error
        assert result.data["payload"]["options"]["units"] == "TWh"
