# src/netviz_core/graph/converter.py
import logging
from itertools import combinations

import networkx as nx

from ..classification import classify_net
from ..data_structures import GraphData, GraphLink, GraphNode, NetlistData

logger = logging.getLogger(__name__)


def convert_to_graph(netlist: NetlistData) -> GraphData:
    """
    Converts a netlist into the node/link sets used by force-directed layout.

    Each component becomes one node, in component order. Each net contributes one
    link per unordered pair of its connections (k connections give k*(k-1)/2 links),
    so a shared net pulls all of its members together rather than forming a star.
    Nets are paired independently; the same component pair appearing on two nets
    yields two links.
    """
    nodes = [
        GraphNode(id=c.name, label=c.name, component_type=c.type)
        for c in netlist.components
    ]

    links = []
    for net in netlist.nets:
        category = classify_net(net.net)
        for first, second in combinations(net.connections, 2):
            links.append(GraphLink(
                source=first.component,
                target=second.component,
                source_pin=first.pin,
                target_pin=second.pin,
                net=net.net,
                net_category=category,
            ))

    logger.debug(f"Converted netlist to graph with {len(nodes)} nodes and {len(links)} links.")
    return GraphData(nodes=nodes, links=links)


def to_networkx(graph_data: GraphData) -> nx.MultiGraph:
    """
    Builds a networkx MultiGraph with one node per graph node and one edge per link.
    Links that reference components without a node are left out; the validator
    reports those separately.
    """
    graph = nx.MultiGraph()
    for node in graph_data.nodes:
        graph.add_node(node.id, component_type=node.component_type)

    for link in graph_data.links:
        if link.source not in graph or link.target not in graph:
            logger.debug(f"Skipping link on net '{link.net}' with unknown endpoint: {link.source} -> {link.target}")
            continue
        graph.add_edge(
            link.source,
            link.target,
            net=link.net,
            source_pin=link.source_pin,
            target_pin=link.target_pin,
            net_category=link.net_category,
        )
    return graph
