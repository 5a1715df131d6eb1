# tests/conftest.py
import pytest

from netviz_core import NetlistParser, NetlistData


# The two-component netlist used throughout the test suite: one IC and one resistor
# joined by a ground net and a power net.
TWO_COMPONENT_NETLIST = {
    "components": [
        {"name": "IC1", "type": "IC", "pins": ["VCC", "GND", "OUT"]},
        {"name": "R1", "type": "Resistor", "pins": ["1", "2"]},
    ],
    "nets": [
        {"net": "GND", "connections": [{"component": "IC1", "pin": "GND"}, {"component": "R1", "pin": "2"}]},
        {"net": "VCC", "connections": [{"component": "IC1", "pin": "VCC"}, {"component": "R1", "pin": "1"}]},
    ],
}

# Adds a connector so the ground net has three members.
THREE_COMPONENT_NETLIST = {
    "components": [
        {"name": "IC1", "type": "IC", "pins": ["VCC", "GND", "OUT"]},
        {"name": "R1", "type": "Resistor", "pins": ["1", "2"]},
        {"name": "CONN1", "type": "Connector", "pins": ["VCC", "GND"]},
    ],
    "nets": [
        {
            "net": "GND",
            "connections": [
                {"component": "IC1", "pin": "GND"},
                {"component": "R1", "pin": "2"},
                {"component": "CONN1", "pin": "GND"},
            ],
        },
        {"net": "VCC", "connections": [{"component": "IC1", "pin": "VCC"}, {"component": "CONN1", "pin": "VCC"}]},
    ],
}


@pytest.fixture
def parser():
    return NetlistParser()


def build_netlist(raw: dict) -> NetlistData:
    """Parses a raw netlist mapping the same way an upload is parsed."""
    return NetlistParser().parse_dict(raw)


@pytest.fixture
def two_component_netlist() -> NetlistData:
    return build_netlist(TWO_COMPONENT_NETLIST)


@pytest.fixture
def three_component_netlist() -> NetlistData:
    return build_netlist(THREE_COMPONENT_NETLIST)
