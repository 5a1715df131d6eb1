# src/netviz_core/data_structures.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class NetCategory(Enum):
    """Semantic category of a net, derived from its name and never stored."""
    POWER = "power"
    GROUND = "ground"
    SIGNAL = "signal"
    CLOCK = "clock"
    SPECIAL = "special"

    def __str__(self):
        return self.value


# --- Netlist Model (immutable, produced by the NetlistParser) ---

@dataclass(frozen=True)
class NetlistComponent:
    """
    A single electronic component. `pins` is always a tuple; a component that
    declared no pins in its source document has an empty tuple.
    """
    name: str
    type: str
    pins: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PinConnection:
    """One component pin attached to a net."""
    component: str
    pin: str


@dataclass(frozen=True)
class NetConnection:
    """A named net and the ordered list of pins it joins."""
    net: str
    connections: Tuple[PinConnection, ...] = ()


@dataclass(frozen=True)
class NetlistData:
    """
    The complete netlist. Component order is display/z-order. References from nets
    to components or pins that do not exist are kept so they can be reported and
    still drawn.
    """
    components: Tuple[NetlistComponent, ...] = ()
    nets: Tuple[NetConnection, ...] = ()

    def get_component(self, name: str) -> Optional[NetlistComponent]:
        """Returns the first component with the given name, or None."""
        for component in self.components:
            if component.name == name:
                return component
        return None


# --- Graph Model (consumed by the force-directed renderer) ---

@dataclass
class GraphNode:
    """
    One node per component. The positional fields are owned by whichever layout
    engine drives the graph; the converter only ever leaves them unset.
    """
    id: str
    label: str
    component_type: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    fx: Optional[float] = None
    fy: Optional[float] = None

    @property
    def is_fixed(self) -> bool:
        return self.fx is not None and self.fy is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "label": self.label}
        if self.component_type is not None:
            data["componentType"] = self.component_type
        for key in ("x", "y", "fx", "fy"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class GraphLink:
    """A connection between two component pins that share a net."""
    source: str
    target: str
    source_pin: str
    target_pin: str
    net: str
    net_category: Optional[NetCategory] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "source": self.source,
            "target": self.target,
            "sourcePin": self.source_pin,
            "targetPin": self.target_pin,
            "net": self.net,
        }
        if self.net_category is not None:
            data["netCategory"] = self.net_category.value
        return data


@dataclass
class GraphData:
    """The node and link sets handed to the layout engine."""
    nodes: List[GraphNode] = field(default_factory=list)
    links: List[GraphLink] = field(default_factory=list)

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }


@dataclass(frozen=True)
class PinPosition:
    """Absolute canvas coordinates of a pin."""
    x: float
    y: float
