# src/netviz_core/graph/layout.py
"""
Force-directed placement of graph nodes on the schematic canvas.

Positions are computed with networkx's Fruchterman-Reingold spring layout in a
normalized frame and mapped onto the canvas. Nodes with both `fx` and `fy` set are
treated as pinned (e.g. while being dragged) and keep those coordinates.
"""
import logging
from typing import Dict, List, Set, Tuple

import networkx as nx
import numpy as np

from ..config import LayoutConfig
from ..data_structures import GraphData
from .converter import to_networkx
from .exceptions import LayoutError

logger = logging.getLogger(__name__)


class ForceLayout:
    """Assigns canvas positions to the nodes of a GraphData in place."""

    def __init__(self, config: LayoutConfig = None):
        self.config = config if config is not None else LayoutConfig()
        self.center = np.array([self.config.width / 2, self.config.height / 2], dtype=float)
        self.scale = min(self.config.width, self.config.height) / 2 - self.config.margin
        if self.scale <= 0:
            raise LayoutError(
                details=f"Canvas {self.config.width}x{self.config.height} leaves no room inside a margin of {self.config.margin}."
            )

    def _to_frame(self, x: float, y: float) -> Tuple[float, float]:
        fx, fy = (np.array([x, y], dtype=float) - self.center) / self.scale
        return float(fx), float(fy)

    def _to_canvas(self, position) -> Tuple[float, float]:
        x, y = self.center + np.asarray(position, dtype=float) * self.scale
        return float(x), float(y)

    @staticmethod
    def _fit_free_nodes(positions: Dict[str, np.ndarray], fixed: Set[str]) -> Dict[str, np.ndarray]:
        """
        spring_layout skips its rescaling step when nodes are pinned, so free nodes
        can drift outside the unit frame. Shrinks them about the centre until they
        fit again; pinned nodes are left untouched.
        """
        free = [node_id for node_id in positions if node_id not in fixed]
        if not free:
            return positions
        extent = float(np.abs(np.array([positions[node_id] for node_id in free])).max())
        if extent <= 1.0:
            return positions
        logger.debug(f"Free nodes spread to {extent:.2f}x the layout frame; shrinking them to fit.")
        return {
            node_id: (position if node_id in fixed else np.asarray(position) / extent)
            for node_id, position in positions.items()
        }

    def apply(self, graph_data: GraphData) -> GraphData:
        if not graph_data.nodes:
            logger.debug("Empty graph; nothing to lay out.")
            return graph_data

        graph = to_networkx(graph_data)

        initial: Dict[str, Tuple[float, float]] = {}
        fixed: List[str] = []
        for node in graph_data.nodes:
            if node.is_fixed:
                initial[node.id] = self._to_frame(node.fx, node.fy)
                fixed.append(node.id)
            elif node.x is not None and node.y is not None:
                initial[node.id] = self._to_frame(node.x, node.y)

        try:
            positions = nx.spring_layout(
                graph,
                k=self.config.link_distance / self.scale,
                pos=initial or None,
                fixed=fixed or None,
                iterations=self.config.iterations,
                seed=self.config.seed,
            )
        except (nx.NetworkXException, ValueError) as e:
            raise LayoutError(details=f"Spring layout failed: {e}", node_count=len(graph_data.nodes)) from e

        if fixed:
            positions = self._fit_free_nodes(positions, set(fixed))

        for node in graph_data.nodes:
            if node.is_fixed:
                node.x, node.y = node.fx, node.fy
            else:
                node.x, node.y = self._to_canvas(positions[node.id])

        logger.info(f"Laid out {len(graph_data.nodes)} nodes ({len(fixed)} pinned) on a {self.config.width}x{self.config.height} canvas.")
        return graph_data
