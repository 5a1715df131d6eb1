# tests/test_netlist_validator.py
import pytest

from netviz_core import (
    NetlistValidator, validate_netlist, ValidationIssueLevel, NetlistIssueCode,
    NetlistComponent, NetConnection, NetlistData, PinConnection,
)
from tests.conftest import build_netlist, THREE_COMPONENT_NETLIST, TWO_COMPONENT_NETLIST

NO_GROUND_MESSAGE = "No ground net found. Every PCB should have a ground connection."
NO_POWER_MESSAGE = "No power net found. Most PCBs require power distribution."


def with_changes(base: dict, **overrides) -> NetlistData:
    raw = {"components": list(base["components"]), "nets": list(base["nets"])}
    raw.update(overrides)
    return build_netlist(raw)


class TestValidNetlists:

    def test_two_component_netlist_is_valid(self, two_component_netlist):
        assert validate_netlist(two_component_netlist) == []

    def test_three_component_netlist_is_valid(self, three_component_netlist):
        assert validate_netlist(three_component_netlist) == []

    def test_validation_is_idempotent(self, three_component_netlist):
        validator = NetlistValidator(three_component_netlist)
        first = [i.message for i in validator.validate()]
        second = [i.message for i in validator.validate()]
        assert first == second
        assert validate_netlist(three_component_netlist) == validate_netlist(three_component_netlist)

    def test_input_is_not_mutated(self, two_component_netlist):
        snapshot = repr(two_component_netlist)
        validate_netlist(two_component_netlist)
        assert repr(two_component_netlist) == snapshot

    def test_requires_netlist_data(self):
        with pytest.raises(TypeError):
            NetlistValidator({"components": [], "nets": []})


class TestComponentChecks:

    def test_blank_component_name(self):
        netlist = with_changes(THREE_COMPONENT_NETLIST, components=[
            {"name": "", "type": "IC", "pins": ["VCC", "GND"]},
            *THREE_COMPONENT_NETLIST["components"][1:],
        ])
        assert "Component name cannot be blank." in validate_netlist(netlist)

    def test_whitespace_name_is_blank(self):
        netlist = with_changes(TWO_COMPONENT_NETLIST, components=[
            *TWO_COMPONENT_NETLIST["components"],
            {"name": "   ", "type": "Resistor", "pins": ["1"]},
        ])
        assert "Component name cannot be blank." in validate_netlist(netlist)

    def test_missing_type(self):
        netlist = with_changes(TWO_COMPONENT_NETLIST, components=[
            *TWO_COMPONENT_NETLIST["components"],
            {"name": "X9", "pins": ["1"]},
        ])
        assert "Component X9 has no type specified." in validate_netlist(netlist)

    @pytest.mark.parametrize("pins", [[], None])
    def test_empty_or_absent_pins(self, pins):
        component = {"name": "U7", "type": "Resistor"}
        if pins is not None:
            component["pins"] = pins
        netlist = with_changes(TWO_COMPONENT_NETLIST, components=[*TWO_COMPONENT_NETLIST["components"], component])
        assert "Component U7 has no pins defined." in validate_netlist(netlist)

    def test_duplicate_names_are_reported_once(self):
        netlist = with_changes(TWO_COMPONENT_NETLIST, components=[
            *TWO_COMPONENT_NETLIST["components"],
            {"name": "R1", "type": "Resistor", "pins": ["1", "2"]},
            {"name": "R1", "type": "Resistor", "pins": ["1", "2"]},
            {"name": "IC1", "type": "IC", "pins": ["VCC", "GND", "OUT"]},
        ])
        messages = validate_netlist(netlist)
        duplicates = [m for m in messages if m.startswith("Duplicate component names")]
        assert duplicates == ["Duplicate component names: R1, R1, IC1"]


class TestNetChecks:

    def test_blank_net_name(self):
        netlist = with_changes(TWO_COMPONENT_NETLIST, nets=[
            *TWO_COMPONENT_NETLIST["nets"],
            {"net": "", "connections": [{"component": "IC1", "pin": "OUT"}, {"component": "R1", "pin": "1"}]},
        ])
        assert "Net name cannot be blank." in validate_netlist(netlist)

    @pytest.mark.parametrize("connections", [[], [{"component": "IC1", "pin": "OUT"}]])
    def test_insufficient_connections(self, connections):
        netlist = with_changes(TWO_COMPONENT_NETLIST, nets=[
            *TWO_COMPONENT_NETLIST["nets"],
            {"net": "DATA", "connections": connections},
        ])
        assert "Net DATA has insufficient connections (needs at least 2)." in validate_netlist(netlist)

    def test_unknown_component(self):
        netlist = with_changes(TWO_COMPONENT_NETLIST, nets=[
            *TWO_COMPONENT_NETLIST["nets"],
            {"net": "DATA", "connections": [{"component": "IC1", "pin": "OUT"}, {"component": "X1", "pin": "1"}]},
        ])
        assert "Net DATA references unknown component: X1" in validate_netlist(netlist)

    def test_missing_pin_only_checked_for_known_components(self):
        netlist = with_changes(TWO_COMPONENT_NETLIST, nets=[
            *TWO_COMPONENT_NETLIST["nets"],
            {"net": "DATA", "connections": [{"component": "IC1", "pin": "IN"}, {"component": "X1", "pin": "IN"}]},
        ])
        messages = validate_netlist(netlist)
        assert "Component IC1 does not have pin IN" in messages
        assert "Component X1 does not have pin IN" not in messages
        assert "Net DATA references unknown component: X1" in messages


class TestDesignRuleChecks:

    def test_missing_ground_net(self):
        netlist = with_changes(THREE_COMPONENT_NETLIST, nets=[
            n for n in THREE_COMPONENT_NETLIST["nets"] if n["net"].lower() != "gnd"
        ])
        messages = validate_netlist(netlist)
        assert messages.count(NO_GROUND_MESSAGE) == 1
        # Without a ground net no per-component ground warnings are produced.
        assert not any("is not connected to ground" in m for m in messages)

    def test_component_not_connected_to_ground(self):
        netlist = with_changes(THREE_COMPONENT_NETLIST, components=[
            *THREE_COMPONENT_NETLIST["components"],
            {"name": "U2", "type": "Inductor", "pins": ["1", "2"]},
        ])
        assert "U2 is not connected to ground - this may cause issues." in validate_netlist(netlist)

    def test_ic_missing_from_ground_net(self):
        netlist = with_changes(THREE_COMPONENT_NETLIST, nets=[
            {"net": "GND", "connections": [{"component": "R1", "pin": "2"}, {"component": "CONN1", "pin": "GND"}]},
            THREE_COMPONENT_NETLIST["nets"][1],
        ])
        assert "IC1 is not connected to ground - this may cause issues." in validate_netlist(netlist)

    @pytest.mark.parametrize("component_type", ["resistor", "Connector", "LED", "CAPACITOR"])
    def test_exempt_types_need_no_ground(self, component_type):
        netlist = with_changes(THREE_COMPONENT_NETLIST, components=[
            *THREE_COMPONENT_NETLIST["components"],
            {"name": "P9", "type": component_type, "pins": ["SIG"]},
        ])
        assert "P9 is not connected to ground - this may cause issues." not in validate_netlist(netlist)

    def test_missing_power_net(self):
        netlist = with_changes(TWO_COMPONENT_NETLIST, nets=[TWO_COMPONENT_NETLIST["nets"][0]])
        assert validate_netlist(netlist) == [NO_POWER_MESSAGE]

    def test_empty_netlist(self):
        assert validate_netlist(NetlistData()) == [NO_GROUND_MESSAGE, NO_POWER_MESSAGE]


class TestIssueStructure:

    def test_message_order_follows_check_order(self):
        netlist = NetlistData(
            components=(
                NetlistComponent(name="U1", type="", pins=()),
                NetlistComponent(name="U1", type="IC", pins=("A",)),
            ),
            nets=(
                NetConnection(net="SIG", connections=(PinConnection("U1", "B"),)),
            ),
        )
        assert validate_netlist(netlist) == [
            "Component U1 has no type specified.",
            "Component U1 has no pins defined.",
            "Duplicate component names: U1",
            "Net SIG has insufficient connections (needs at least 2).",
            "Component U1 does not have pin B",
            NO_GROUND_MESSAGE,
            NO_POWER_MESSAGE,
        ]

    def test_issues_carry_codes_levels_and_context(self):
        netlist = with_changes(THREE_COMPONENT_NETLIST, components=[
            *THREE_COMPONENT_NETLIST["components"],
            {"name": "U2", "type": "IC", "pins": ["1"]},
        ], nets=[
            *THREE_COMPONENT_NETLIST["nets"],
            {"net": "DATA", "connections": [{"component": "IC1", "pin": "OUT"}, {"component": "U2", "pin": "9"}]},
        ])
        issues = NetlistValidator(netlist).validate()

        pin_issue = next(i for i in issues if i.code == NetlistIssueCode.NET_REF_UNKNOWN_PIN.code)
        assert pin_issue.level is ValidationIssueLevel.ERROR
        assert (pin_issue.component, pin_issue.pin, pin_issue.net) == ("U2", "9", "DATA")

        ground_issue = next(i for i in issues if i.code == NetlistIssueCode.GND_CONN_MISSING.code)
        assert ground_issue.level is ValidationIssueLevel.WARNING
        assert ground_issue.component == "U2"
        assert "GND_CONN_MISSING" in str(ground_issue)

    def test_issue_code_reports_missing_template_key(self):
        message = NetlistIssueCode.NET_REF_UNKNOWN_PIN.format_message(component="U1")
        assert message.startswith("Error formatting message for NET_REF_UNKNOWN_PIN")
