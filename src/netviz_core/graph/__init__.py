"""
Graph conversion, pin layout, node layout and trace routing for schematic rendering.
"""
from .converter import convert_to_graph, to_networkx
from .pin_layout import (
    FALLBACK_PIN_POSITION, PinLayoutCalculator, pin_offset, pin_position, pin_positions,
)
from .layout import ForceLayout
from .routing import manhattan_route, route_links, trace_path, trace_style
from .exceptions import LayoutError

__all__ = [
    "convert_to_graph",
    "to_networkx",
    "FALLBACK_PIN_POSITION",
    "PinLayoutCalculator",
    "pin_offset",
    "pin_position",
    "pin_positions",
    "ForceLayout",
    "manhattan_route",
    "route_links",
    "trace_path",
    "trace_style",
    "LayoutError",
]
