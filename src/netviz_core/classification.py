# src/netviz_core/classification.py
"""
Name-based classification of nets and components for validation and visual encoding.

Every function here is pure and total: any string, including the empty string,
maps to exactly one result.
"""
import logging
import re
from typing import Dict, Tuple

from .data_structures import NetCategory, NetlistComponent

logger = logging.getLogger(__name__)

# Numeric supply rails such as "12v" or "9v0".
VOLTAGE_NET_REGEX = re.compile(r"\d+v\d*", re.ASCII)

# Priority-ordered; the first rule that matches wins, so "gnd_clk" is ground.
NET_CATEGORY_RULES: Tuple[Tuple[NetCategory, Tuple[str, ...]], ...] = (
    (NetCategory.GROUND, ("gnd", "ground")),
    (NetCategory.POWER, ("vcc", "vdd", "pwr", "3v3", "5v", "power")),
    (NetCategory.CLOCK, ("clk", "clock", "osc")),
    (NetCategory.SPECIAL, ("rst", "reset", "enable", "cs", "ce")),
)

NET_CATEGORY_COLORS: Dict[NetCategory, str] = {
    NetCategory.POWER: "#ff4444",
    NetCategory.GROUND: "#888888",
    NetCategory.CLOCK: "#44ff44",
    NetCategory.SPECIAL: "#ffaa44",
    NetCategory.SIGNAL: "#4488ff",
}

COMPONENT_SYMBOLS: Dict[str, str] = {
    "ic": "□",
    "microcontroller": "□",
    "processor": "□",
    "resistor": "⧟",
    "resistance": "⧟",
    "capacitor": "⊥⊥",
    "cap": "⊥⊥",
    "connector": "⊞",
    "conn": "⊞",
    "module": "▬",
    "board": "▬",
    "inductor": "◐",
    "led": "◊",
    "diode": "▷",
    "transistor": "▲",
    "switch": "⫸",
    "relay": "⧈",
    "crystal": "◇",
    "fuse": "═══",
}
DEFAULT_COMPONENT_SYMBOL = "◯"

SYMBOL_KINDS: Dict[str, str] = {
    "ic": "ic",
    "microcontroller": "ic",
    "processor": "ic",
    "resistor": "resistor",
    "resistance": "resistor",
    "capacitor": "capacitor",
    "cap": "capacitor",
    "connector": "connector",
    "conn": "connector",
}


def classify_net(net_name: str) -> NetCategory:
    """Maps a net name to its category using case-insensitive substring rules."""
    name = net_name.lower()
    for category, fragments in NET_CATEGORY_RULES:
        if category is NetCategory.GROUND and name == "0v":
            return category
        if category is NetCategory.POWER and VOLTAGE_NET_REGEX.fullmatch(name):
            return category
        if any(fragment in name for fragment in fragments):
            return category
    return NetCategory.SIGNAL


def net_color(net_name: str) -> str:
    """Returns the hex stroke color for a net."""
    return NET_CATEGORY_COLORS[classify_net(net_name)]


def component_symbol(component_type: str) -> str:
    """Returns the unicode symbol used for text-only rendering of a component type."""
    return COMPONENT_SYMBOLS.get(component_type.lower(), DEFAULT_COMPONENT_SYMBOL)


def symbol_kind(component_type: str) -> str:
    """Returns which schematic symbol is drawn for a type: ic, resistor, capacitor, connector or generic."""
    return SYMBOL_KINDS.get(component_type.lower(), "generic")


def symbol_size(component: NetlistComponent) -> Tuple[float, float]:
    """
    Returns the (width, height) of the body outline used for error overlays.
    IC bodies grow with their pin count; every other body is a fixed box.
    """
    if component.type.lower() == "ic":
        return 120.0, float(max(60, len(component.pins) * 12 + 20))
    return 80.0, 40.0
