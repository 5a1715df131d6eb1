# src/netviz_core/graph/pin_layout.py
"""
Schematic pin placement relative to a component's simulated position.

Components typed "ic" are drawn as a dual-inline package: the first half of the
pins (rounded up) runs down the left edge and the rest down the right edge. Every
other component gets a single horizontal strip of pins below its body.

Pin positions are always derived from the node's current position and never cached,
because the layout engine moves nodes on every tick.
"""
import logging
import math
from typing import Dict, Optional

from ..constants import (
    IC_PIN_COLUMN_OFFSET,
    IC_PIN_ROW_SCALE,
    PIN_SPACING,
    STRIP_PIN_SCALE,
    STRIP_PIN_Y_OFFSET,
)
from ..data_structures import GraphData, GraphNode, NetlistComponent, NetlistData, PinPosition

logger = logging.getLogger(__name__)

#: Returned for pins that cannot be located.
FALLBACK_PIN_POSITION = PinPosition(0.0, 0.0)


def pin_offset(index: int, total: int, spacing: float = PIN_SPACING) -> float:
    """Offset of pin `index` in a row of `total` pins, centred on zero."""
    return (index - (total - 1) / 2) * spacing


def _position_for_index(component: NetlistComponent, node: GraphNode, index: int) -> PinPosition:
    node_x = node.x if node.x is not None else 0.0
    node_y = node.y if node.y is not None else 0.0
    total = len(component.pins)

    if component.type.lower() == "ic":
        left_count = math.ceil(total / 2)
        if index < left_count:
            offset = pin_offset(index, left_count)
            return PinPosition(node_x - IC_PIN_COLUMN_OFFSET, node_y + offset * IC_PIN_ROW_SCALE)
        offset = pin_offset(index - left_count, total - left_count)
        return PinPosition(node_x + IC_PIN_COLUMN_OFFSET, node_y + offset * IC_PIN_ROW_SCALE)

    offset = pin_offset(index, total)
    return PinPosition(node_x + offset * STRIP_PIN_SCALE, node_y + STRIP_PIN_Y_OFFSET)


def pin_position(component: NetlistComponent, node: GraphNode, pin_name: str) -> PinPosition:
    """
    Absolute position of one pin. A pin name that the component does not declare
    resolves to FALLBACK_PIN_POSITION instead of raising.
    """
    try:
        index = component.pins.index(pin_name)
    except ValueError:
        logger.debug(f"Pin '{pin_name}' not found on component '{component.name}'; using fallback position.")
        return FALLBACK_PIN_POSITION
    return _position_for_index(component, node, index)


def pin_positions(component: NetlistComponent, node: GraphNode) -> Dict[str, PinPosition]:
    """Absolute positions of all pins of a component, keyed by pin name."""
    positions: Dict[str, PinPosition] = {}
    for index, pin in enumerate(component.pins):
        # A repeated pin name keeps the position of its first occurrence.
        positions.setdefault(pin, _position_for_index(component, node, index))
    return positions


class PinLayoutCalculator:
    """
    Resolves pin positions by component id against a netlist and its graph, for use
    from a layout engine's tick loop. Unknown components, nodes or pins resolve to
    FALLBACK_PIN_POSITION.
    """

    def __init__(self, netlist: NetlistData, graph_data: GraphData):
        self.netlist = netlist
        self.graph_data = graph_data

    def _resolve(self, component_id: str):
        node: Optional[GraphNode] = self.graph_data.get_node(component_id)
        component: Optional[NetlistComponent] = self.netlist.get_component(component_id)
        return node, component

    def position(self, component_id: str, pin_name: str) -> PinPosition:
        node, component = self._resolve(component_id)
        if node is None or component is None:
            logger.debug(f"Component '{component_id}' has no node or definition; using fallback pin position.")
            return FALLBACK_PIN_POSITION
        return pin_position(component, node, pin_name)

    def positions(self, component_id: str) -> Dict[str, PinPosition]:
        node, component = self._resolve(component_id)
        if node is None or component is None:
            return {}
        return pin_positions(component, node)
