# src/netviz_core/graph/routing.py
import logging
from typing import List, Tuple

from ..classification import net_color
from ..data_structures import GraphData, GraphLink, PinPosition
from .pin_layout import PinLayoutCalculator

logger = logging.getLogger(__name__)

GROUND_TRACE_DASH = "5,5"


def manhattan_route(source: PinPosition, target: PinPosition) -> List[PinPosition]:
    """Right-angle route between two pins that turns at the horizontal midpoint."""
    mid_x = (source.x + target.x) / 2
    return [
        source,
        PinPosition(mid_x, source.y),
        PinPosition(mid_x, target.y),
        target,
    ]


def trace_path(source: PinPosition, target: PinPosition) -> str:
    """SVG path data for the Manhattan route between two pins."""
    start, *rest = manhattan_route(source, target)
    return f"M {start.x:g} {start.y:g} " + " ".join(f"L {p.x:g} {p.y:g}" for p in rest)


def route_links(graph_data: GraphData, calculator: PinLayoutCalculator) -> List[Tuple[GraphLink, List[PinPosition]]]:
    """Routes every link of the graph from the current node positions."""
    routes = []
    for link in graph_data.links:
        source = calculator.position(link.source, link.source_pin)
        target = calculator.position(link.target, link.target_pin)
        routes.append((link, manhattan_route(source, target)))
    return routes


def trace_style(link: GraphLink) -> Tuple[str, str]:
    """(stroke color, dash pattern) of a trace; only a net literally named gnd is dashed."""
    dash = GROUND_TRACE_DASH if link.net.lower() == "gnd" else "none"
    return net_color(link.net), dash
