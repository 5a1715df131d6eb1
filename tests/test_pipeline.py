# tests/test_pipeline.py
import json

import pytest

from netviz_core import (
    LayoutConfig, NetlistData, NetlistLoadError, NetlistProcessingError, load_netlist, process_netlist,
)
from tests.conftest import THREE_COMPONENT_NETLIST, TWO_COMPONENT_NETLIST

BROKEN_NETLIST = {
    "components": [{"name": "U1", "type": "IC", "pins": ["VCC", "GND"]}],
    "nets": [
        {"net": "GND", "connections": [{"component": "U1", "pin": "GND"}, {"component": "U2", "pin": "1"}]},
        {"net": "VCC", "connections": [{"component": "U1", "pin": "VCC"}, {"component": "U1", "pin": "7"}]},
    ],
}


class TestLoadNetlist:

    def test_accepts_all_source_kinds(self, tmp_path, two_component_netlist):
        path = tmp_path / "board.json"
        path.write_text(json.dumps(TWO_COMPONENT_NETLIST), encoding="utf-8")

        assert load_netlist(two_component_netlist) is two_component_netlist
        assert load_netlist(TWO_COMPONENT_NETLIST) == two_component_netlist
        assert load_netlist(json.dumps(TWO_COMPONENT_NETLIST)) == two_component_netlist
        assert load_netlist(path) == two_component_netlist
        assert load_netlist(str(path)) == two_component_netlist

    def test_invalid_json_raises_load_error(self):
        with pytest.raises(NetlistLoadError) as excinfo:
            load_netlist("{broken")
        assert "Invalid JSON file." in str(excinfo.value)

    def test_unsupported_source_type(self):
        with pytest.raises(TypeError):
            load_netlist(42)


class TestProcessNetlist:

    def test_valid_netlist_report(self):
        report = process_netlist(THREE_COMPONENT_NETLIST)
        assert isinstance(report.netlist, NetlistData)
        assert report.errors == []
        assert not report.has_errors
        assert len(report.graph.nodes) == 3
        # GND has three members (3 links), VCC has two (1 link).
        assert len(report.graph.links) == 4
        assert report.analysis.connection_count == 5

    def test_invalid_netlist_is_still_converted(self):
        report = process_netlist(BROKEN_NETLIST)
        assert report.has_errors
        assert "Net GND references unknown component: U2" in report.errors
        assert "Component U1 does not have pin 7" in report.errors
        assert report.highlights.pin_errors == {"U1": {"7"}}
        assert "U2" in report.highlights.component_errors
        assert len(report.graph.nodes) == 1

    def test_strict_mode_raises(self):
        with pytest.raises(NetlistProcessingError) as excinfo:
            process_netlist(BROKEN_NETLIST, strict=True)
        assert "Netlist Validation Error" in str(excinfo.value)

    def test_strict_mode_allows_warnings(self):
        raw = {
            "components": [*TWO_COMPONENT_NETLIST["components"], {"name": "Q1", "type": "Transistor", "pins": ["B"]}],
            "nets": TWO_COMPONENT_NETLIST["nets"],
        }
        report = process_netlist(raw, strict=True)
        assert report.errors == ["Q1 is not connected to ground - this may cause issues."]
        assert not report.has_errors

    def test_layout_positions_every_node(self):
        report = process_netlist(THREE_COMPONENT_NETLIST, layout=True, config=LayoutConfig(seed=1))
        assert all(node.x is not None and node.y is not None for node in report.graph.nodes)

    def test_to_dict(self, two_component_netlist):
        data = process_netlist(two_component_netlist).to_dict()
        assert data["errors"] == []
        assert {node["id"] for node in data["graph"]["nodes"]} == {"IC1", "R1"}
        assert data["analysis"]["componentCount"] == 2
