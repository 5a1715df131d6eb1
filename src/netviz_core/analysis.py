# src/netviz_core/analysis.py
"""
Aggregate statistics of a netlist for informational display.
"""
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict

from .classification import classify_net
from .constants import (
    COMPONENT_COMPLEXITY_WEIGHT,
    CONNECTION_COMPLEXITY_WEIGHT,
    NET_COMPLEXITY_WEIGHT,
)
from .data_structures import NetlistData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CircuitAnalysisResults:
    """
    The result of analyzing a netlist. `complexity_score` is a relative metric only:
    a fixed linear weighting of components, nets and connections.
    """
    component_count: int
    net_count: int
    connection_count: int
    component_types: Dict[str, int]
    net_categories: Dict[str, int]
    complexity_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentCount": self.component_count,
            "netCount": self.net_count,
            "connectionCount": self.connection_count,
            "componentTypes": dict(self.component_types),
            "netCategories": dict(self.net_categories),
            "complexityScore": self.complexity_score,
        }


def analyze_circuit(netlist: NetlistData) -> CircuitAnalysisResults:
    component_count = len(netlist.components)
    net_count = len(netlist.nets)
    connection_count = sum(len(net.connections) for net in netlist.nets)

    component_types = Counter(c.type.lower() for c in netlist.components)
    net_categories = Counter(classify_net(net.net).value for net in netlist.nets)

    complexity_score = (
        component_count * COMPONENT_COMPLEXITY_WEIGHT
        + net_count * NET_COMPLEXITY_WEIGHT
        + connection_count * CONNECTION_COMPLEXITY_WEIGHT
    )

    logger.debug(
        f"Analyzed circuit: {component_count} components, {net_count} nets, "
        f"{connection_count} connections, complexity {complexity_score}."
    )
    return CircuitAnalysisResults(
        component_count=component_count,
        net_count=net_count,
        connection_count=connection_count,
        component_types=dict(component_types),
        net_categories=dict(net_categories),
        complexity_score=complexity_score,
    )
